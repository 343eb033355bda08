"""
Gender vs. Burnout Percentage: burnout distribution per gender.
"""

from __future__ import annotations

import plotly.express as px

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import Gender, PlotType, SelectorState
from burnout_dashboard.views.abstract import AbstractPlotView, ViewResult


class GenderBurnoutView(AbstractPlotView):
    plot_type = PlotType.GENDER_BURNOUT
    title = "Burnout Percentage by Gender"
    description = "Box plot of burnout percentage grouped by gender."

    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:
        frame = data.people_frame()
        figure = px.box(
            frame,
            x="gender",
            y="burnout_percentage",
            category_orders={"gender": [g.value for g in Gender]},
            labels={"gender": "Gender", "burnout_percentage": "Burnout (%)"},
        )
        return self._finish(figure, frame)


__all__ = ["GenderBurnoutView"]
