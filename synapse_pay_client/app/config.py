# Client Configuration using Pydantic BaseSettings
import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # SynapsePay API
    SYNAPSE_BASE_URL: str = "https://uat-api.synapsefi.com/v3.1" # sandbox
    SYNAPSE_CLIENT_ID: Optional[str] = None
    SYNAPSE_CLIENT_SECRET: Optional[str] = None
    SYNAPSE_FINGERPRINT: Optional[str] = None # device fingerprint sent with every user-scoped call
    SYNAPSE_IP_ADDRESS: str = "127.0.0.1"
    SYNAPSE_TIMEOUT: float = 30.0

    # Observability
    LOG_LEVEL: str = "INFO"
    OTEL_EXPORTER_OTLP_TRACES_ENDPOINT: Optional[str] = None
    SERVICE_NAME: str = "synapse-pay-client"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

# Instantiate settings to be imported by other modules
settings = AppSettings()

logger = logging.getLogger(__name__)
logger.debug(f"Client settings loaded. Base URL: {settings.SYNAPSE_BASE_URL}, timeout: {settings.SYNAPSE_TIMEOUT}s")
