"""The NRDOT v2 process optimization dashboard.

Queries are stored unbound; ``build_nrdot_dashboard`` binds every one of them
to the caller's account id and returns a fresh immutable definition.
"""

from src.dashboards.schemas import (
    DashboardDefinition,
    DashboardPermissions,
    NrqlQuery,
    Page,
    Visualization,
    Widget,
    WidgetLayout,
)

DASHBOARD_NAME = "NRDOT v2 - Process Optimization Dashboard"
DASHBOARD_DESCRIPTION = "Monitor NRDOT telemetry optimization and cost reduction"

# (title, visualization, nrql, (column, row, width, height))
OVERVIEW_WIDGETS = [
    (
        "Current Profile",
        Visualization.BILLBOARD,
        "SELECT latest(nrdot.profile) as 'Current Profile' FROM Metric "
        "WHERE nrdot.profile IS NOT NULL SINCE 1 hour ago",
        (1, 1, 4, 3),
    ),
    (
        "Estimated Monthly Cost",
        Visualization.BILLBOARD,
        "SELECT rate(sum(newrelic.resourceSample.IngestBytes), 1 month) * 0.25 / 1000000 "
        "as 'Monthly Cost (USD)' FROM Metric SINCE 1 hour ago",
        (5, 1, 4, 3),
    ),
    (
        "Process Coverage",
        Visualization.BILLBOARD,
        "SELECT uniqueCount(processDisplayName) as 'Monitored Processes' "
        "FROM ProcessSample SINCE 1 hour ago",
        (9, 1, 4, 3),
    ),
    (
        "Metrics Over Time",
        Visualization.LINE,
        "SELECT count(*) FROM Metric WHERE collector.name = 'otelcol-contrib' "
        "TIMESERIES SINCE 1 hour ago",
        (1, 4, 12, 3),
    ),
    (
        "Top Processes by CPU",
        Visualization.BAR,
        "SELECT average(cpuPercent) FROM ProcessSample FACET processDisplayName "
        "SINCE 1 hour ago LIMIT 10",
        (1, 7, 6, 3),
    ),
    (
        "Top Processes by Memory",
        Visualization.BAR,
        "SELECT average(memoryResidentSizeBytes) / 1048576 as 'Memory (MB)' "
        "FROM ProcessSample FACET processDisplayName SINCE 1 hour ago LIMIT 10",
        (7, 7, 6, 3),
    ),
]

COST_ANALYSIS_WIDGETS = [
    (
        "Cost Reduction Trend",
        Visualization.LINE,
        "SELECT average(nrdot.cost.reduction) as 'Cost Reduction %' FROM Metric "
        "TIMESERIES SINCE 24 hours ago",
        (1, 1, 12, 3),
    ),
]


def _build_widgets(rows, account_id: int) -> tuple[Widget, ...]:
    widgets = []
    for title, viz, nrql, (column, row, width, height) in rows:
        widgets.append(
            Widget(
                title=title,
                visualization=viz,
                queries=(NrqlQuery(account_id=account_id, query=nrql),),
                layout=WidgetLayout(column=column, row=row, width=width, height=height),
            )
        )
    return tuple(widgets)


def build_nrdot_dashboard(
    account_id: int,
    permissions: DashboardPermissions = DashboardPermissions.PUBLIC_READ_WRITE,
) -> DashboardDefinition:
    """Build the NRDOT dashboard with every query bound to ``account_id``."""
    return DashboardDefinition(
        name=DASHBOARD_NAME,
        description=DASHBOARD_DESCRIPTION,
        permissions=permissions,
        pages=(
            Page(
                name="Overview",
                description="NRDOT optimization overview",
                widgets=_build_widgets(OVERVIEW_WIDGETS, account_id),
            ),
            Page(
                name="Cost Analysis",
                description="Cost reduction metrics",
                widgets=_build_widgets(COST_ANALYSIS_WIDGETS, account_id),
            ),
        ),
    )
