"""
SynapsePay REST API client.

Example:
    >>> from synapse_pay_client import Client, User, VirtualDocument, setup_json_logging
    >>> setup_json_logging()
    >>> client = Client.from_settings()
    >>> user = User.find(client, "5bd9e16314c7f70c0c4fd3ad")
    >>> base_doc = user.base_documents[0]
    >>> base_doc.add_virtual_documents([VirtualDocument(type="SSN", value="2222")])
"""

from synapse_pay_client.app.client import Client
from synapse_pay_client.app.observability import setup_json_logging, setup_opentelemetry
from synapse_pay_client.app.models import (
    BaseDocument,
    Document,
    PhysicalDocument,
    SocialDocument,
    VirtualDocument,
    Question,
    User,
)
from synapse_pay_client.app.service.exceptions import (
    SynapsePayError,
    ValidationError,
    ArgumentError,
    ApiError,
    AuthError,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "setup_json_logging",
    "setup_opentelemetry",
    "BaseDocument",
    "Document",
    "PhysicalDocument",
    "SocialDocument",
    "VirtualDocument",
    "Question",
    "User",
    "SynapsePayError",
    "ValidationError",
    "ArgumentError",
    "ApiError",
    "AuthError",
]
