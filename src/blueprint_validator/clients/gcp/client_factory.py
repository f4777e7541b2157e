# src/blueprint_validator/clients/gcp/client_factory.py
"""Google Cloud client factory."""

from typing import Dict, Any
import structlog
import google.auth
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from blueprint_validator.core.exceptions import ClientConnectionException
from .compute_client import ComputeClient

logger = structlog.get_logger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class GCPClientFactory:
    """Factory for creating Google Cloud service clients."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.credentials_file = config.get("credentials_file")
        self.quota_project_id = config.get("quota_project_id")

        self._credentials = None
        self.logger = logger.bind(factory="gcp")

    def _get_credentials(self):
        """Get Google credentials based on configuration."""
        if self._credentials:
            return self._credentials

        try:
            if self.credentials_file:
                self._credentials = service_account.Credentials.from_service_account_file(
                    self.credentials_file,
                    scopes=[CLOUD_PLATFORM_SCOPE]
                )
                self.logger.info("Using service account credentials", path=self.credentials_file)
            else:
                self._credentials, _ = google.auth.default(
                    scopes=[CLOUD_PLATFORM_SCOPE],
                    quota_project_id=self.quota_project_id
                )
                self.logger.info("Using application default credentials")

            return self._credentials

        except (GoogleAuthError, OSError, ValueError) as e:
            raise ClientConnectionException("GoogleCloud", f"Failed to create credentials: {e}") from e

    def create_compute_client(self) -> ComputeClient:
        """Create the client backing the precondition validators.

        Credentials are resolved when the client first connects.
        """
        return ComputeClient(
            config=self.config,
            credentials_loader=self._get_credentials
        )
