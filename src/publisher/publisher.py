"""Publish the NRDOT dashboard to New Relic and record what was created.

A run is strictly linear:

1. Read settings from the environment (ConfigurationError, no network)
2. Build the dashboard with every query bound to the configured account
3. Send one ``dashboardCreate`` mutation (TransportError on HTTP failure)
4. Check top-level GraphQL errors -> PROTOCOL_ERROR
5. Check ``dashboardCreate.errors`` -> DOMAIN_ERROR
6. Write ``dashboards/created-dashboard.json`` -> SUCCESS

Steps 4 and 5 return a tagged PublishResult instead of exiting, so the
whole flow can be exercised without terminating the process. Nothing is
retried: a second run creates a second dashboard and overwrites the file.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from src.dashboards.definition import build_nrdot_dashboard
from src.dashboards.schemas import DashboardDefinition
from src.nerdgraph.client import NerdGraphClient
from src.nerdgraph.config import NerdGraphSettings
from src.nerdgraph.errors import SummaryWriteError
from src.publisher.mutations import DASHBOARD_CREATE_MUTATION
from src.publisher.schemas import (
    CreatedDashboard,
    DashboardSummary,
    PublishError,
    PublishResult,
    PublishStatus,
)

logger = logging.getLogger(__name__)

_PROJECT_ROOT: Path = Path(__file__).parent.parent.parent

DEFAULT_OUTPUT_PATH: Path = _PROJECT_ROOT / "dashboards" / "created-dashboard.json"


class DashboardPublisher:
    """Creates one dashboard per ``publish()`` call."""

    def __init__(
        self,
        settings: NerdGraphSettings,
        client: Optional[NerdGraphClient] = None,
        output_path: Optional[Path] = None,
    ):
        self.settings = settings
        self.client = client
        self.output_path = Path(output_path or DEFAULT_OUTPUT_PATH)

    # ── Request ──

    def build_dashboard(self) -> DashboardDefinition:
        return build_nrdot_dashboard(
            self.settings.account_id,
            permissions=self.settings.permissions,
        )

    def build_variables(self, dashboard: DashboardDefinition) -> dict[str, Any]:
        """Mutation variables; the account id scopes both the mutation and every query."""
        bound = dashboard.account_ids()
        if bound != {self.settings.account_id}:
            raise ValueError(
                f"Dashboard queries bound to accounts {sorted(bound)}, "
                f"expected only {self.settings.account_id}"
            )
        return {
            "accountId": self.settings.account_id,
            "dashboard": dashboard.to_input(),
        }

    # ── Response interpretation ──

    @staticmethod
    def check_protocol_errors(payload: dict[str, Any]) -> Optional[PublishResult]:
        """Stage 1: GraphQL-level errors (malformed document, auth failure).

        Any ``errors`` value other than null is fatal, including an empty list.
        """
        errors = payload.get("errors")
        if errors is None:
            return None
        logger.error(f"GraphQL errors: {json.dumps(errors, indent=2, default=str)}")
        entries = errors if isinstance(errors, list) else [errors]
        if not entries:
            entries = ["GraphQL response carried an empty errors list"]
        return PublishResult(
            status=PublishStatus.PROTOCOL_ERROR,
            errors=[PublishError.from_graphql_error(e) for e in entries],
        )

    @staticmethod
    def _unexpected_shape(description: str, value: Any) -> PublishResult:
        logger.error(f"{description}: {value!r}")
        return PublishResult(
            status=PublishStatus.DOMAIN_ERROR,
            errors=[PublishError(description=description, type="UNEXPECTED_RESPONSE")],
        )

    @staticmethod
    def check_mutation_errors(payload: dict[str, Any]) -> PublishResult:
        """Stage 2: errors reported by ``dashboardCreate`` itself."""
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            return DashboardPublisher._unexpected_shape("Response data is not an object", data)
        result = data.get("dashboardCreate") or {}
        if not isinstance(result, dict):
            return DashboardPublisher._unexpected_shape("dashboardCreate is not an object", result)

        errors = result.get("errors") or []
        if errors:
            logger.error(
                f"Dashboard creation errors: {json.dumps(errors, indent=2, default=str)}"
            )
            entries = errors if isinstance(errors, list) else [errors]
            return PublishResult(
                status=PublishStatus.DOMAIN_ERROR,
                errors=[PublishError.from_mutation_error(e) for e in entries],
            )

        entity = result.get("entityResult")
        try:
            dashboard = CreatedDashboard.model_validate(entity)
        except ValidationError as e:
            logger.error(f"dashboardCreate returned no usable entityResult: {entity!r}")
            return PublishResult(
                status=PublishStatus.DOMAIN_ERROR,
                errors=[
                    PublishError(
                        description=f"No dashboard entity in response: {e.error_count()} problem(s)",
                        type="MISSING_ENTITY_RESULT",
                    )
                ],
            )
        return PublishResult(status=PublishStatus.SUCCESS, dashboard=dashboard)

    def interpret_response(self, payload: dict[str, Any]) -> PublishResult:
        protocol_failure = self.check_protocol_errors(payload)
        if protocol_failure is not None:
            return protocol_failure
        return self.check_mutation_errors(payload)

    # ── Persistence ──

    def write_summary(self, dashboard: CreatedDashboard, url: str) -> DashboardSummary:
        """Overwrite the summary file with the created dashboard's details.

        Raises:
            SummaryWriteError: If the file or its directory cannot be written
        """
        summary = DashboardSummary(
            guid=dashboard.guid,
            name=dashboard.name,
            account_id=dashboard.account_id,
            created_at=datetime.now(timezone.utc).isoformat(),
            url=url,
        )
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "w", encoding="utf-8") as f:
                json.dump(summary.to_file_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            raise SummaryWriteError(
                f"Could not write dashboard summary to {self.output_path}: {e}",
                guid=dashboard.guid,
                url=url,
                path=str(self.output_path),
            ) from e
        logger.info(f"Saved dashboard summary to {self.output_path}")
        return summary

    # ── Orchestration ──

    def publish(self) -> PublishResult:
        """Create the dashboard and persist its summary on success.

        Raises:
            TransportError: If the HTTP exchange with NerdGraph fails
            SummaryWriteError: If the dashboard was created but the summary
                file could not be written
        """
        dashboard = self.build_dashboard()
        variables = self.build_variables(dashboard)

        logger.info(
            f"Creating dashboard '{dashboard.name}' in account {self.settings.account_id} "
            f"({self.settings.region}, {len(dashboard.pages)} pages, "
            f"{sum(1 for _ in dashboard.iter_widgets())} widgets)"
        )

        if self.client is not None:
            payload = self.client.execute(DASHBOARD_CREATE_MUTATION, variables)
        else:
            with NerdGraphClient(self.settings) as client:
                payload = client.execute(DASHBOARD_CREATE_MUTATION, variables)

        result = self.interpret_response(payload)
        if not result.ok:
            return result

        created = result.dashboard
        logger.info(f"Dashboard created: {created.name} (GUID: {created.guid})")

        url = self.settings.dashboard_url(created.guid)
        self.write_summary(created, url)
        logger.info(f"View your dashboard at: {url}")

        return result.model_copy(update={"url": url, "output_path": str(self.output_path)})


def publish(
    settings: Optional[NerdGraphSettings] = None,
    client: Optional[NerdGraphClient] = None,
    output_path: Optional[Path] = None,
) -> PublishResult:
    """Publish the NRDOT dashboard.

    Args:
        settings: Connection settings; read from the environment when omitted
        client: NerdGraph client to reuse; a fresh one is opened and closed
            when omitted
        output_path: Where the summary JSON is written on success
            (defaults to dashboards/created-dashboard.json)

    Raises:
        ConfigurationError: If required environment variables are missing,
            before any network call
        TransportError: If the HTTP exchange fails
        SummaryWriteError: If the summary file cannot be written
    """
    if settings is None:
        settings = NerdGraphSettings.from_env()
    return DashboardPublisher(settings, client=client, output_path=output_path).publish()
