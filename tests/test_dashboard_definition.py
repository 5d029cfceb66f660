"""Tests for the dashboard data model and the NRDOT definition."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.dashboards import (
    DashboardPermissions,
    NrqlQuery,
    Visualization,
    Widget,
    WidgetLayout,
    build_nrdot_dashboard,
)


def test_every_widget_query_is_bound_to_the_given_account() -> None:
    """No widget is emitted without the configured account binding."""

    dashboard = build_nrdot_dashboard(987654)
    payload = dashboard.to_input()

    queries = [
        q
        for page in payload["pages"]
        for widget in page["widgets"]
        for q in widget["configuration"]["nrqlQueries"]
    ]
    assert queries
    assert all(q["accountId"] == 987654 for q in queries)
    assert dashboard.account_ids() == {987654}


def test_nrdot_definition_content() -> None:
    dashboard = build_nrdot_dashboard(1)

    assert dashboard.name == "NRDOT v2 - Process Optimization Dashboard"
    assert dashboard.permissions is DashboardPermissions.PUBLIC_READ_WRITE
    assert [p.name for p in dashboard.pages] == ["Overview", "Cost Analysis"]
    assert [w.title for w in dashboard.pages[0].widgets] == [
        "Current Profile",
        "Estimated Monthly Cost",
        "Process Coverage",
        "Metrics Over Time",
        "Top Processes by CPU",
        "Top Processes by Memory",
    ]
    assert {w.visualization for w in dashboard.iter_widgets()} == {
        Visualization.BILLBOARD,
        Visualization.LINE,
        Visualization.BAR,
    }


def test_widget_serializes_to_dashboard_input_shape() -> None:
    widget = build_nrdot_dashboard(42).pages[0].widgets[0]

    assert widget.to_input() == {
        "title": "Current Profile",
        "visualization": {"id": "viz.billboard"},
        "configuration": {
            "nrqlQueries": [
                {
                    "accountId": 42,
                    "query": (
                        "SELECT latest(nrdot.profile) as 'Current Profile' FROM Metric "
                        "WHERE nrdot.profile IS NOT NULL SINCE 1 hour ago"
                    ),
                }
            ]
        },
        "layout": {"column": 1, "row": 1, "width": 4, "height": 3},
    }


def test_permissions_are_carried_into_the_input() -> None:
    dashboard = build_nrdot_dashboard(1, permissions=DashboardPermissions.PRIVATE)
    assert dashboard.to_input()["permissions"] == "PRIVATE"


def test_each_call_builds_a_fresh_definition() -> None:
    first = build_nrdot_dashboard(1)
    second = build_nrdot_dashboard(2)

    assert first is not second
    assert first.account_ids() == {1}


def test_definition_is_immutable() -> None:
    dashboard = build_nrdot_dashboard(1)

    with pytest.raises(ValidationError):
        dashboard.name = "Renamed"
    with pytest.raises(ValidationError):
        dashboard.pages[0].widgets[0].layout.column = 3


def test_all_layouts_fit_the_twelve_column_grid() -> None:
    for widget in build_nrdot_dashboard(1).iter_widgets():
        assert widget.layout.column + widget.layout.width - 1 <= 12


@pytest.mark.parametrize(
    "column, width",
    [(0, 4), (13, 1), (9, 5), (1, 13)],
)
def test_layout_rejects_positions_outside_the_grid(column: int, width: int) -> None:
    with pytest.raises(ValidationError):
        WidgetLayout(column=column, row=1, width=width, height=3)


def test_widget_requires_at_least_one_query() -> None:
    with pytest.raises(ValidationError):
        Widget(
            title="Empty",
            visualization=Visualization.LINE,
            queries=(),
            layout=WidgetLayout(column=1, row=1, width=4, height=3),
        )


def test_query_requires_positive_account_id() -> None:
    with pytest.raises(ValidationError):
        NrqlQuery(account_id=0, query="SELECT count(*) FROM Metric")
