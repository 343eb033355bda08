"""
Gender vs. Salary: salary distribution per gender as a grouped box plot.
"""

from __future__ import annotations

import plotly.express as px

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import Gender, PlotType, SelectorState
from burnout_dashboard.views.abstract import AbstractPlotView, ViewResult


class GenderSalaryView(AbstractPlotView):
    """
    One box per gender, colored by gender, over the full person table.
    """

    plot_type = PlotType.GENDER_SALARY
    title = "Salary by Gender"
    description = "Box plot of salary grouped and colored by gender."

    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:
        frame = data.people_frame()
        figure = px.box(
            frame,
            x="gender",
            y="salary",
            color="gender",
            category_orders={"gender": [g.value for g in Gender]},
            labels={"gender": "Gender", "salary": "Salary"},
        )
        return self._finish(figure, frame)


__all__ = ["GenderSalaryView"]
