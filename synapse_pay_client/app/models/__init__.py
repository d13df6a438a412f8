from .document import Document
from .physical_document import PhysicalDocument
from .social_document import SocialDocument
from .virtual_document import VirtualDocument
from .question import Question
from .base_document import BaseDocument
from .user import User

__all__ = [
    "Document",
    "PhysicalDocument",
    "SocialDocument",
    "VirtualDocument",
    "Question",
    "BaseDocument",
    "User",
]
