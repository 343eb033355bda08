"""
Industry Burnout: one bar segment per respondent, grouped under its industry.

No aggregation happens; bars for the same industry stack on the same x
position.
"""

from __future__ import annotations

import plotly.express as px

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import Industry, PlotType, SelectorState
from burnout_dashboard.views.abstract import AbstractPlotView, ViewResult

TICK_ANGLE = -45


class IndustryBurnoutView(AbstractPlotView):
    plot_type = PlotType.INDUSTRY_BURNOUT
    title = "Burnout Percentage by Industry"
    description = "Per-respondent burnout bars grouped and colored by industry."

    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:
        frame = data.people_frame()
        figure = px.bar(
            frame,
            x="industry",
            y="burnout_percentage",
            color="industry",
            category_orders={"industry": [i.value for i in Industry]},
            labels={"industry": "Industry", "burnout_percentage": "Burnout (%)"},
        )
        figure.update_xaxes(tickangle=TICK_ANGLE)
        return self._finish(figure, frame)


__all__ = ["IndustryBurnoutView", "TICK_ANGLE"]
