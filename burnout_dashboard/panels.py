"""
Static panels that sit beside the chart: the respondent table, the city map,
and the info line.

The table and the map read only the snapshot, never the selector state, so
they are built once per layout.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
from dash import dash_table

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import SelectorState
from burnout_dashboard.renderer import resolve_view
from burnout_dashboard.views.abstract import ViewResult

TABLE_COLUMNS: Dict[str, str] = {
    "gender": "Gender",
    "age": "Age",
    "salary": "Salary",
    "industry": "Industry",
    "burnout_percentage": "Burnout %",
    "ethnicity": "Ethnicity",
    "burnout_ethnicity": "Ethnicity Burnout",
}

MAP_STYLE = "open-street-map"
MAP_HEIGHT = 450
# Map radius units covered by one pixel of marker radius.
RADIUS_UNITS_PER_PIXEL = 2000.0


def table_records(data: DashboardData) -> List[Dict[str, Any]]:
    """Rows for the table panel, rounded for display."""
    frame = data.people_frame()
    frame["salary"] = frame["salary"].round(0).astype(int)
    frame["burnout_percentage"] = frame["burnout_percentage"].round(1)
    return frame[list(TABLE_COLUMNS)].to_dict("records")


def build_table(data: DashboardData, page_size: int = 10, table_id: str = "people-table") -> dash_table.DataTable:
    return dash_table.DataTable(
        id=table_id,
        columns=[{"name": label, "id": key} for key, label in TABLE_COLUMNS.items()],
        data=table_records(data),
        page_size=page_size,
        sort_action="native",
        style_table={"overflowX": "auto", "width": "100%"},
        style_cell={"textAlign": "left", "padding": "8px", "fontSize": "12px"},
        style_header={"backgroundColor": "#e2e8f0", "fontWeight": "bold"},
    )


def map_markers(data: DashboardData, radius_scale: float = 1000.0) -> pd.DataFrame:
    """
    One row per city with a marker radius linear in its burnout percentage.
    """
    frame = data.cities_frame()
    frame["radius"] = frame["burnout"] * radius_scale
    return frame


def build_map_figure(data: DashboardData, radius_scale: float = 1000.0, zoom: float = 3.0) -> go.Figure:
    """
    City markers whose drawn radius is `burnout * radius_scale` divided by
    RADIUS_UNITS_PER_PIXEL, so doubling either factor doubles the marker.
    """
    markers = map_markers(data, radius_scale)
    figure = px.scatter_map(
        markers,
        lat="lat",
        lon="lng",
        hover_name="city",
        hover_data={"burnout": True, "reason": True, "lat": False, "lng": False},
        labels={"burnout": "Burnout (%)", "reason": "Reason"},
        zoom=zoom,
        height=MAP_HEIGHT,
        map_style=MAP_STYLE,
    )
    # drawn diameter in pixels is size / sizeref
    figure.update_traces(
        marker={
            "size": markers["radius"].tolist(),
            "sizemode": "diameter",
            "sizeref": RADIUS_UNITS_PER_PIXEL / 2,
        }
    )
    figure.update_layout(title="Burnout by City", margin={"t": 40, "l": 0, "r": 0, "b": 0})
    return figure


def info_text(result: ViewResult, state: Optional[SelectorState] = None) -> str:
    """
    One-line summary of what the chart currently shows.
    """
    state = state if state is not None else result.get("state")
    if state is None:
        return result.get("notes") or ""
    rows = result.get("rows", 0)
    if resolve_view(state.plot_type).uses_ethnicity:
        return f"{state.plot_type.value}: {rows} {state.ethnicity.value} respondents."
    return (
        f"{state.plot_type.value}: {rows} rows plotted. "
        "The ethnicity selection does not apply to this chart."
    )


__all__ = [
    "RADIUS_UNITS_PER_PIXEL",
    "TABLE_COLUMNS",
    "build_map_figure",
    "build_table",
    "info_text",
    "map_markers",
    "table_records",
]
