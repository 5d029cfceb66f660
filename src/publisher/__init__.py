"""Dashboard publishing: one ``dashboardCreate`` call plus a local summary file."""

from src.publisher.publisher import (
    DEFAULT_OUTPUT_PATH,
    DashboardPublisher,
    publish,
)
from src.publisher.schemas import (
    CreatedDashboard,
    DashboardSummary,
    PublishError,
    PublishResult,
    PublishStatus,
)

__all__ = [
    "DEFAULT_OUTPUT_PATH",
    "DashboardPublisher",
    "publish",
    "CreatedDashboard",
    "DashboardSummary",
    "PublishError",
    "PublishResult",
    "PublishStatus",
]
