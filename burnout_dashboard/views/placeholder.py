"""
Placeholder view rendered when the selector carries a value no view handles.

The UI only offers registered plot types, so this should never show up; it
exists so a bad value produces a labelled empty chart instead of a crash.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import SelectorState
from burnout_dashboard.views.abstract import PLOT_TEMPLATE, ViewResult


class PlaceholderView:
    plot_type = None
    title = "No chart available"
    description = "Empty figure with an explanatory annotation."
    uses_ethnicity = False

    def __init__(self, requested: Optional[str] = None) -> None:
        self.requested = requested

    @property
    def message(self) -> str:
        if self.requested:
            return f"No chart available for '{self.requested}'."
        return "No chart available."

    def build(self, data: Optional[DashboardData] = None, state: Optional[SelectorState] = None) -> ViewResult:
        figure = go.Figure()
        figure.add_annotation(
            text=self.message,
            x=0.5,
            y=0.5,
            xref="paper",
            yref="paper",
            showarrow=False,
            font={"size": 16},
        )
        figure.update_xaxes(visible=False)
        figure.update_yaxes(visible=False)
        figure.update_layout(title=self.title, template=PLOT_TEMPLATE)
        return ViewResult(
            figure=figure,
            frame=pd.DataFrame(),
            title=self.title,
            rows=0,
            notes=self.message,
        )


__all__ = ["PlaceholderView"]
