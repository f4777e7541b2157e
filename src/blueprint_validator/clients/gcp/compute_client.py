"""Google Cloud client answering blueprint precondition queries."""

from typing import Any, Callable, Dict, Optional
import structlog
from google.cloud import compute_v1, resourcemanager_v3
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from requests.exceptions import RequestException

from blueprint_validator.core.base_client import BaseClient
from blueprint_validator.core.exceptions import ClientConnectionException, PreconditionException

logger = structlog.get_logger(__name__)

# API, credential refresh and REST transport failures
PROVIDER_ERRORS = (GoogleAPIError, GoogleAuthError, RequestException)

PROJECT_ERROR = "project ID {project} does not exist or your credentials do not have permission to access it"
REGION_ERROR = ("region {region} is not available in project ID {project} "
                "or your credentials do not have permission to access it")
ZONE_ERROR = ("zone {zone} is not available in project ID {project} "
              "or your credentials do not have permission to access it")
ZONE_IN_REGION_ERROR = ("zone {zone} is not in region {region} in project ID {project} "
                        "or your credentials do not have permission to access it")


class ComputeClient(BaseClient):
    """Client for project, region and zone lookups.

    Projects are read through Resource Manager, regions and zones through
    the Compute Engine API. Credentials are obtained on first use, so a
    credentials problem fails the validator that needed them rather than
    the whole run. Any API, auth or transport error is reported as a failed
    precondition.
    """

    def __init__(self, config: Dict[str, Any], credentials=None,
                 credentials_loader: Optional[Callable[[], Any]] = None):
        super().__init__(config, "ComputeClient")
        self.credentials = credentials
        self.credentials_loader = credentials_loader
        self.quota_project_id: Optional[str] = config.get("quota_project_id")

        self._projects_client = None
        self._regions_client = None
        self._zones_client = None

    def connect(self) -> None:
        """Create the Resource Manager and Compute Engine clients."""
        if self.credentials is None and self.credentials_loader is not None:
            self.credentials = self.credentials_loader()

        client_options = {"quota_project_id": self.quota_project_id} if self.quota_project_id else None
        try:
            self._projects_client = resourcemanager_v3.ProjectsClient(
                credentials=self.credentials,
                client_options=client_options
            )
            self._regions_client = compute_v1.RegionsClient(
                credentials=self.credentials,
                client_options=client_options
            )
            self._zones_client = compute_v1.ZonesClient(
                credentials=self.credentials,
                client_options=client_options
            )

            self._connected = True
            self.logger.info("Google Cloud clients connected successfully")

        except Exception as e:
            raise ClientConnectionException("GoogleCloud", f"Connection failed: {e}") from e

    def disconnect(self) -> None:
        """Close the underlying transports."""
        for client in [self._projects_client, self._regions_client, self._zones_client]:
            if client:
                client.transport.close()

        self._projects_client = None
        self._regions_client = None
        self._zones_client = None
        self._connected = False
        self.logger.info("Google Cloud clients disconnected")

    def health_check(self) -> bool:
        return self._connected and self._projects_client is not None

    def _ensure_connected(self) -> None:
        if not self._connected:
            self.connect()

    def project_exists(self, project_id: str) -> None:
        self._ensure_connected()
        try:
            self._projects_client.get_project(name=f"projects/{project_id}")
        except PROVIDER_ERRORS as e:
            self.logger.debug("Project lookup failed", project_id=project_id, error=str(e))
            raise PreconditionException(
                PROJECT_ERROR.format(project=project_id), {"project_id": project_id}
            ) from e

    def region_exists(self, project_id: str, region: str) -> None:
        self._ensure_connected()
        try:
            self._regions_client.get(project=project_id, region=region)
        except PROVIDER_ERRORS as e:
            self.logger.debug("Region lookup failed", project_id=project_id, region=region, error=str(e))
            raise PreconditionException(
                REGION_ERROR.format(region=region, project=project_id),
                {"project_id": project_id, "region": region}
            ) from e

    def zone_exists(self, project_id: str, zone: str) -> None:
        self._ensure_connected()
        try:
            self._zones_client.get(project=project_id, zone=zone)
        except PROVIDER_ERRORS as e:
            self.logger.debug("Zone lookup failed", project_id=project_id, zone=zone, error=str(e))
            raise PreconditionException(
                ZONE_ERROR.format(zone=zone, project=project_id),
                {"project_id": project_id, "zone": zone}
            ) from e

    def zone_in_region(self, project_id: str, zone: str, region: str) -> None:
        self._ensure_connected()
        details = {"project_id": project_id, "zone": zone, "region": region}
        message = ZONE_IN_REGION_ERROR.format(zone=zone, region=region, project=project_id)
        try:
            region_info = self._regions_client.get(project=project_id, region=region)
            zone_info = self._zones_client.get(project=project_id, zone=zone)
        except PROVIDER_ERRORS as e:
            self.logger.debug("Zone/region lookup failed", error=str(e), **details)
            raise PreconditionException(message, details) from e

        # zone.region is the self link of the region that owns the zone
        if zone_info.region != region_info.self_link:
            raise PreconditionException(message, details)
