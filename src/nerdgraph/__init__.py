"""NerdGraph access: environment settings, error types and the HTTP client."""

from src.nerdgraph.client import NerdGraphClient
from src.nerdgraph.config import NerdGraphSettings
from src.nerdgraph.errors import (
    ConfigurationError,
    DashboardPublishError,
    SummaryWriteError,
    TransportError,
)

__all__ = [
    "NerdGraphClient",
    "NerdGraphSettings",
    "ConfigurationError",
    "DashboardPublishError",
    "SummaryWriteError",
    "TransportError",
]
