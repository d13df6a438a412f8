# User model: owns authentication state and the user's base documents
import logging
from typing import Optional, List, Dict, Any

from synapse_pay_client.app.service.exceptions import ApiError, AuthError
from .base_document import BaseDocument

logger = logging.getLogger(__name__)


class User:
    def __init__(
        self,
        client: Any,
        id: str,
        refresh_token: str,
        logins: Optional[List[Dict[str, Any]]] = None,
        legal_names: Optional[List[str]] = None,
        permission: Optional[str] = None,
        base_documents: Optional[List[BaseDocument]] = None,
    ):
        self.client = client
        self.id = id
        self.refresh_token = refresh_token
        self.logins = logins or []
        self.legal_names = legal_names or []
        self.permission = permission
        self.base_documents: List[BaseDocument] = base_documents or []

    @classmethod
    def create_from_response(cls, client: Any, response: Dict[str, Any]) -> "User":
        user = cls(
            client=client,
            id=response["_id"],
            refresh_token=response.get("refresh_token", ""),
            logins=response.get("logins"),
            legal_names=response.get("legal_names"),
            permission=response.get("permission"),
        )
        user.base_documents = BaseDocument.create_from_response(user, response)
        return user

    @classmethod
    def find(cls, client: Any, id: str) -> "User":
        return cls.create_from_response(client, client.users.get(id))

    def authenticate(self) -> "User":
        """
        Exchanges the refresh token for an OAuth key, scoping the HTTP client to this user.

        Raises:
            AuthError: If the API rejects the refresh token.
            ApiError: For any other API failure.
        """
        try:
            self.client.users.refresh(self.id, {"refresh_token": self.refresh_token})
        except ApiError as e:
            if e.status_code in (401, 403):
                logger.warning(f"Authentication rejected for user {self.id}: {e}")
                raise AuthError(self.id, str(e)) from e
            raise
        logger.debug(f"User {self.id} authenticated")
        return self

    def create_base_document(self, **kwargs: Any) -> BaseDocument:
        base_document = BaseDocument.create(user=self, **kwargs)
        self.base_documents.append(base_document)
        return base_document
