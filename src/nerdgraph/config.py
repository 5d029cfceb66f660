"""NerdGraph connection settings read from the process environment.

Required environment variables:
    NEW_RELIC_API_KEY: User API key sent in the ``API-Key`` header
    NEW_RELIC_ACCOUNT_ID: Numeric account the dashboard is created in

Optional:
    NEW_RELIC_REGION: ``US`` (default) or ``EU``
    NEW_RELIC_DASHBOARD_PERMISSIONS: PUBLIC_READ_WRITE (default),
        PUBLIC_READ_ONLY or PRIVATE

A ``.env`` file at the project root is loaded first; variables already set in
the process environment take precedence over it.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.dashboards.schemas import DashboardPermissions
from src.nerdgraph.errors import ConfigurationError

logger = logging.getLogger(__name__)

_PROJECT_ROOT: Path = Path(__file__).parent.parent.parent

API_KEY_VAR = "NEW_RELIC_API_KEY"
ACCOUNT_ID_VAR = "NEW_RELIC_ACCOUNT_ID"
REGION_VAR = "NEW_RELIC_REGION"
PERMISSIONS_VAR = "NEW_RELIC_DASHBOARD_PERMISSIONS"

# region -> (graphql endpoint, dashboard viewer host)
REGIONS: dict[str, tuple[str, str]] = {
    "US": ("https://api.newrelic.com/graphql", "one.newrelic.com"),
    "EU": ("https://api.eu.newrelic.com/graphql", "one.eu.newrelic.com"),
}


@dataclass(frozen=True)
class NerdGraphSettings:
    """Validated settings for one publish run."""

    api_key: str = field(repr=False)
    account_id: int
    region: str = "US"
    permissions: DashboardPermissions = DashboardPermissions.PUBLIC_READ_WRITE

    @property
    def endpoint(self) -> str:
        return REGIONS[self.region][0]

    @property
    def viewer_host(self) -> str:
        return REGIONS[self.region][1]

    def dashboard_url(self, guid: str) -> str:
        """Browser URL for a dashboard entity."""
        return f"https://{self.viewer_host}/dashboards/{guid}"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        load_env_file: bool = True,
    ) -> "NerdGraphSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            load_env_file: Load ``<project root>/.env`` into ``os.environ`` first

        Raises:
            ConfigurationError: If a required variable is missing or a value
                is invalid
        """
        if environ is None:
            if load_env_file:
                load_dotenv(_PROJECT_ROOT / ".env", override=False)
            environ = os.environ

        api_key = (environ.get(API_KEY_VAR) or "").strip()
        raw_account_id = (environ.get(ACCOUNT_ID_VAR) or "").strip()
        if not api_key or not raw_account_id:
            raise ConfigurationError(
                f"Missing required environment variables: {API_KEY_VAR}, {ACCOUNT_ID_VAR}"
            )

        try:
            account_id = int(raw_account_id)
        except ValueError:
            raise ConfigurationError(
                f"{ACCOUNT_ID_VAR} must be a numeric account id, got {raw_account_id!r}"
            ) from None
        if account_id <= 0:
            raise ConfigurationError(
                f"{ACCOUNT_ID_VAR} must be a positive integer, got {account_id}"
            )

        region = (environ.get(REGION_VAR) or "US").strip().upper()
        if region not in REGIONS:
            raise ConfigurationError(
                f"{REGION_VAR} must be one of {', '.join(REGIONS)}, got {region!r}"
            )

        raw_permissions = (environ.get(PERMISSIONS_VAR) or "").strip().upper()
        if raw_permissions:
            try:
                permissions = DashboardPermissions(raw_permissions)
            except ValueError:
                allowed = ", ".join(p.value for p in DashboardPermissions)
                raise ConfigurationError(
                    f"{PERMISSIONS_VAR} must be one of {allowed}, got {raw_permissions!r}"
                ) from None
        else:
            permissions = DashboardPermissions.PUBLIC_READ_WRITE

        logger.debug(
            f"NerdGraph settings: account {account_id}, region {region}, "
            f"permissions {permissions.value}"
        )
        return cls(
            api_key=api_key,
            account_id=account_id,
            region=region,
            permissions=permissions,
        )
