"""Dashboard definition schemas for NerdGraph's DashboardInput.

A DashboardDefinition is built once, never mutated, and serialized with
``to_input()`` into the exact shape the ``dashboardCreate`` mutation expects.
All models are frozen so a definition cannot drift between construction
and submission.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Dashboards lay widgets out on a 12-column grid
GRID_COLUMNS = 12


class Visualization(str, Enum):
    """Widget visualization kinds."""

    BILLBOARD = "viz.billboard"
    LINE = "viz.line"
    BAR = "viz.bar"


class DashboardPermissions(str, Enum):
    """Access levels accepted by NerdGraph for a dashboard."""

    PUBLIC_READ_WRITE = "PUBLIC_READ_WRITE"
    PUBLIC_READ_ONLY = "PUBLIC_READ_ONLY"
    PRIVATE = "PRIVATE"


class NrqlQuery(BaseModel):
    """One NRQL query bound to an account."""

    model_config = ConfigDict(frozen=True)

    account_id: int = Field(gt=0, description="Account the query runs against")
    query: str = Field(min_length=1, description="NRQL text, passed through untouched")

    def to_input(self) -> dict[str, Any]:
        return {"accountId": self.account_id, "query": self.query}


class WidgetLayout(BaseModel):
    """Position and size of a widget on the dashboard grid."""

    model_config = ConfigDict(frozen=True)

    column: int = Field(ge=1, le=GRID_COLUMNS)
    row: int = Field(ge=1)
    width: int = Field(ge=1, le=GRID_COLUMNS)
    height: int = Field(ge=1)

    @model_validator(mode="after")
    def _fits_grid(self) -> "WidgetLayout":
        if self.column + self.width - 1 > GRID_COLUMNS:
            raise ValueError(
                f"Widget spans columns {self.column}-{self.column + self.width - 1}, "
                f"grid has {GRID_COLUMNS}"
            )
        return self

    def to_input(self) -> dict[str, int]:
        return {
            "column": self.column,
            "row": self.row,
            "width": self.width,
            "height": self.height,
        }


class Widget(BaseModel):
    """A single panel on a dashboard page."""

    model_config = ConfigDict(frozen=True)

    title: str
    visualization: Visualization
    queries: tuple[NrqlQuery, ...] = Field(
        min_length=1,
        description="NRQL queries feeding the widget (at least one)",
    )
    layout: WidgetLayout

    def to_input(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "visualization": {"id": self.visualization.value},
            "configuration": {
                "nrqlQueries": [q.to_input() for q in self.queries],
            },
            "layout": self.layout.to_input(),
        }


class Page(BaseModel):
    """A named page grouping widgets."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    widgets: tuple[Widget, ...] = ()

    def to_input(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "widgets": [w.to_input() for w in self.widgets],
        }


class DashboardDefinition(BaseModel):
    """Complete dashboard, ready to be sent as the ``dashboard`` variable."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    permissions: DashboardPermissions = DashboardPermissions.PUBLIC_READ_WRITE
    pages: tuple[Page, ...] = Field(min_length=1)

    def iter_widgets(self):
        """Yield every widget across all pages, in page order."""
        for page in self.pages:
            yield from page.widgets

    def account_ids(self) -> set[int]:
        """Distinct account ids referenced by any widget query."""
        return {q.account_id for w in self.iter_widgets() for q in w.queries}

    def to_input(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "permissions": self.permissions.value,
            "pages": [p.to_input() for p in self.pages],
        }
