"""Dashboard data model and the static NRDOT dashboard definition."""

from src.dashboards.schemas import (
    DashboardDefinition,
    DashboardPermissions,
    NrqlQuery,
    Page,
    Visualization,
    Widget,
    WidgetLayout,
)
from src.dashboards.definition import build_nrdot_dashboard

__all__ = [
    "DashboardDefinition",
    "DashboardPermissions",
    "NrqlQuery",
    "Page",
    "Visualization",
    "Widget",
    "WidgetLayout",
    "build_nrdot_dashboard",
]
