"""Result schemas for a dashboard publish run."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PublishStatus(str, Enum):
    """Outcome tag of a publish run that reached NerdGraph."""

    SUCCESS = "success"
    PROTOCOL_ERROR = "protocol_error"  # top-level GraphQL ``errors``
    DOMAIN_ERROR = "domain_error"  # ``dashboardCreate.errors``


class PublishError(BaseModel):
    """One error reported by NerdGraph."""

    description: str
    type: str = Field(description="Platform error tag, e.g. INVALID_INPUT")

    @classmethod
    def from_graphql_error(cls, entry: Any) -> "PublishError":
        """Normalize a top-level GraphQL error object.

        GraphQL errors carry ``message`` and optionally
        ``extensions.errorClass``; mutation errors already carry
        ``description`` and ``type``.
        """
        if not isinstance(entry, dict):
            return cls(description=str(entry), type="GRAPHQL_ERROR")
        extensions = entry.get("extensions") or {}
        return cls(
            description=str(entry.get("message") or entry.get("description") or entry),
            type=str(extensions.get("errorClass") or entry.get("type") or "GRAPHQL_ERROR"),
        )

    @classmethod
    def from_mutation_error(cls, entry: Any) -> "PublishError":
        if not isinstance(entry, dict):
            return cls(description=str(entry), type="UNKNOWN")
        return cls(
            description=str(entry.get("description") or entry),
            type=str(entry.get("type") or "UNKNOWN"),
        )


class CreatedDashboard(BaseModel):
    """The ``entityResult`` of a successful ``dashboardCreate``."""

    model_config = ConfigDict(populate_by_name=True)

    guid: str = Field(min_length=1)
    name: str
    account_id: int = Field(alias="accountId")
    permissions: Optional[str] = None
    created_at: Optional[Any] = Field(default=None, alias="createdAt")
    updated_at: Optional[Any] = Field(default=None, alias="updatedAt")
    dashboard_parent_guid: Optional[str] = Field(default=None, alias="dashboardParentGuid")


class DashboardSummary(BaseModel):
    """Contents of the local summary file written after a successful run."""

    model_config = ConfigDict(populate_by_name=True)

    guid: str
    name: str
    account_id: int = Field(alias="accountId")
    created_at: str = Field(alias="createdAt", description="ISO-8601 time of the local write")
    url: str

    def to_file_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class PublishResult(BaseModel):
    """Tagged result of interpreting a NerdGraph response."""

    status: PublishStatus
    dashboard: Optional[CreatedDashboard] = None
    errors: list[PublishError] = Field(default_factory=list)
    url: Optional[str] = None
    output_path: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == PublishStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
