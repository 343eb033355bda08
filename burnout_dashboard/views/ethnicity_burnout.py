"""
Burnout by Ethnicity: the burnout series for the selected ethnicity only.

This is the one view driven by the ethnicity selector. It filters the person
table down to the selected block before plotting.
"""

from __future__ import annotations

import plotly.express as px

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import PlotType, SelectorState
from burnout_dashboard.views.abstract import ETHNICITY_COLORS, AbstractPlotView, ViewResult


class EthnicityBurnoutView(AbstractPlotView):
    plot_type = PlotType.ETHNICITY_BURNOUT
    title = "Burnout by Ethnicity"
    description = "Bar chart of ethnicity burnout scores for the selected ethnicity."
    uses_ethnicity = True

    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:
        people = data.people_frame()
        frame = people.loc[people["ethnicity"] == state.ethnicity.value].reset_index(drop=True)
        figure = px.bar(
            frame,
            x="ethnicity",
            y="burnout_ethnicity",
            color="ethnicity",
            color_discrete_map=ETHNICITY_COLORS,
            labels={"ethnicity": "Ethnicity", "burnout_ethnicity": "Burnout score"},
        )
        return self._finish(figure, frame, title=f"{self.title}: {state.ethnicity.value}")


__all__ = ["EthnicityBurnoutView"]
