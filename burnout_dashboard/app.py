"""
Dash application factory for the burnout dashboard.

Usage:
    from burnout_dashboard.app import create_app

    app = create_app()
    app.run(host="127.0.0.1", port=8050)
"""

from __future__ import annotations

from typing import Optional, Tuple

import plotly.graph_objects as go
from dash import Dash, Input, Output, dcc, html

from burnout_dashboard.config import Settings, get_settings
from burnout_dashboard.dataset import DashboardData, generate_dataset
from burnout_dashboard.domain.models import Ethnicity
from burnout_dashboard.panels import build_map_figure, build_table, info_text
from burnout_dashboard.renderer import available_views, render_view, resolve_view
from burnout_dashboard.utils.logging import get_logger

log = get_logger(__name__)

APP_TITLE = "Workplace Burnout Dashboard"


def render_outputs(data: DashboardData, plot_type: str, ethnicity: str) -> Tuple[go.Figure, str]:
    """Chart figure and info line for one selector state."""
    result = render_view(data, plot_type, ethnicity)
    return result["figure"], info_text(result)


def ethnicity_selector_disabled(plot_type: str) -> bool:
    try:
        return not resolve_view(plot_type).uses_ethnicity
    except ValueError:
        return True


def _dropdown(label: str, component_id: str, options, value: str) -> html.Div:
    return html.Div(
        [
            html.Label(label),
            dcc.Dropdown(
                id=component_id,
                options=[{"label": o, "value": o} for o in options],
                value=value,
                clearable=False,
            ),
        ],
        style={"flex": "1", "marginRight": "8px"},
    )


def build_layout(data: DashboardData, settings: Settings) -> html.Div:
    return html.Div(
        [
            html.H2(APP_TITLE, style={"textAlign": "center"}),
            html.Div(
                "Synthetic sample data, regenerated when the server starts.",
                style={"textAlign": "center", "marginBottom": "12px"},
            ),
            html.Div(
                [
                    _dropdown(
                        "Plot type",
                        "plot-type",
                        available_views(),
                        settings.default_plot_type.value,
                    ),
                    _dropdown(
                        "Ethnicity",
                        "ethnicity-select",
                        [e.value for e in Ethnicity],
                        settings.default_ethnicity.value,
                    ),
                ],
                style={"display": "flex", "gap": "8px", "alignItems": "flex-end"},
            ),
            dcc.Graph(id="chart"),
            html.Div(id="info", style={"margin": "8px 0", "color": "#4b5563"}),
            html.Hr(),
            dcc.Graph(
                id="city-map",
                figure=build_map_figure(data, settings.map_radius_scale, settings.map_zoom),
            ),
            html.Hr(),
            build_table(data, page_size=settings.table_page_size),
        ],
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "10px 16px"},
    )


def create_app(settings: Optional[Settings] = None, data: Optional[DashboardData] = None) -> Dash:
    """
    Build the Dash app around one immutable snapshot.

    Parameters
    ----------
    settings : Settings | None
        Defaults to the cached environment settings.
    data : DashboardData | None
        Snapshot to serve. Generated from `settings.dataset_seed` when omitted.
    """
    settings = settings or get_settings()
    data = data if data is not None else generate_dataset(seed=settings.dataset_seed)

    app = Dash(__name__, title=APP_TITLE)
    app.layout = build_layout(data, settings)

    @app.callback(
        Output("chart", "figure"),
        Output("info", "children"),
        Input("plot-type", "value"),
        Input("ethnicity-select", "value"),
    )
    def update_chart(plot_type, ethnicity):
        return render_outputs(data, plot_type, ethnicity)

    @app.callback(
        Output("ethnicity-select", "disabled"),
        Input("plot-type", "value"),
    )
    def toggle_ethnicity(plot_type):
        return ethnicity_selector_disabled(plot_type)

    log.info(
        "Dashboard app created",
        extra={"people": len(data.people), "cities": len(data.cities), "seed": data.seed},
    )
    return app


__all__ = ["APP_TITLE", "build_layout", "create_app", "ethnicity_selector_disabled", "render_outputs"]
