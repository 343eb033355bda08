"""
Cultural Influence: parental pressure per ethnicity, from the fixed literal
table rather than the sampled respondents.
"""

from __future__ import annotations

import plotly.express as px

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import Ethnicity, PlotType, SelectorState
from burnout_dashboard.views.abstract import ETHNICITY_COLORS, AbstractPlotView, ViewResult


class CulturalInfluenceView(AbstractPlotView):
    plot_type = PlotType.CULTURAL_INFLUENCE
    title = "Parental Pressure by Ethnicity"
    description = "Bar chart of parental pressure percentage, one bar per ethnicity."

    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:
        frame = data.parental_pressure_frame()
        figure = px.bar(
            frame,
            x="ethnicity",
            y="parental_pressure",
            color="ethnicity",
            color_discrete_map=ETHNICITY_COLORS,
            category_orders={"ethnicity": [e.value for e in Ethnicity]},
            labels={"ethnicity": "Ethnicity", "parental_pressure": "Parental pressure (%)"},
        )
        return self._finish(figure, frame)


__all__ = ["CulturalInfluenceView"]
