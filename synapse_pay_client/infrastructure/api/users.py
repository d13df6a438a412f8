# Users resource of the SynapsePay API
import logging
from typing import Dict, Any

from synapse_pay_client.infrastructure.http_client import HttpClient

logger = logging.getLogger(__name__)


class Users:
    def __init__(self, client: HttpClient):
        self.client = client

    def get(self, user_id: str) -> Dict[str, Any]:
        self.client.update_headers(user_id=user_id)
        return self.client.get(f"/users/{user_id}")

    def update(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        PATCHes the user the HTTP client is currently scoped to (set by refresh/get).
        Base document create/update payloads go through here.
        """
        logger.info(f"Updating user {self.client.user_id}")
        return self.client.patch(f"/users/{self.client.user_id}", payload)

    def refresh(self, user_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Exchanges a refresh token for an OAuth key and scopes the HTTP client to the user."""
        response = self.client.post(f"/oauth/{user_id}", payload)
        self.client.update_headers(oauth_key=response.get("oauth_key"), user_id=user_id)
        return response
