from .document import Document


class SocialDocument(Document):
    """Social profile links and contact details (FACEBOOK, LINKEDIN, EMAIL, PHONE_NUMBER, ...)."""
    pass
