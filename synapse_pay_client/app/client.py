# Client facade: configures the HTTP client and exposes the API resources
import logging
from typing import Optional

from synapse_pay_client.app.config import AppSettings, settings as app_settings
from synapse_pay_client.app.service.exceptions import ValidationError
from synapse_pay_client.infrastructure.http_client import HttpClient
from synapse_pay_client.infrastructure.api.users import Users

logger = logging.getLogger(__name__)


class Client:
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        fingerprint: str,
        ip_address: str,
        base_url: str = app_settings.SYNAPSE_BASE_URL,
        timeout: float = app_settings.SYNAPSE_TIMEOUT,
        http_client: Optional[HttpClient] = None,
    ):
        self.http_client = http_client or HttpClient(
            base_url=base_url,
            client_id=client_id,
            client_secret=client_secret,
            fingerprint=fingerprint,
            ip_address=ip_address,
            timeout=timeout,
        )
        self.users = Users(self.http_client)
        logger.info(f"SynapsePay client initialized for {self.http_client.base_url}")

    @classmethod
    def from_settings(cls, settings: AppSettings = app_settings) -> "Client":
        missing = [
            name for name in ("SYNAPSE_CLIENT_ID", "SYNAPSE_CLIENT_SECRET", "SYNAPSE_FINGERPRINT")
            if not getattr(settings, name)
        ]
        if missing:
            raise ValidationError(f"Missing client settings: {', '.join(missing)}")
        return cls(
            client_id=settings.SYNAPSE_CLIENT_ID,
            client_secret=settings.SYNAPSE_CLIENT_SECRET,
            fingerprint=settings.SYNAPSE_FINGERPRINT,
            ip_address=settings.SYNAPSE_IP_ADDRESS,
            base_url=settings.SYNAPSE_BASE_URL,
            timeout=settings.SYNAPSE_TIMEOUT,
        )

    def close(self) -> None:
        self.http_client.close()
