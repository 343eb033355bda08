from __future__ import annotations

import pytest

from burnout_dashboard.domain.models import Ethnicity, PlotType, SelectorState
from burnout_dashboard.views import (
    CulturalInfluenceView,
    EthnicityBurnoutView,
    GenderBurnoutView,
    GenderSalaryView,
    IndustryBurnoutView,
    PlaceholderView,
    PlotView,
)
from burnout_dashboard.views.industry_burnout import TICK_ANGLE

GENDER_ROWS = 50
BLOCK_ROWS = 20


@pytest.mark.parametrize(
    "view",
    [
        GenderSalaryView(),
        GenderBurnoutView(),
        EthnicityBurnoutView(),
        IndustryBurnoutView(),
        CulturalInfluenceView(),
        PlaceholderView(),
    ],
)
def test_views_satisfy_protocol(view):
    assert isinstance(view, PlotView)


def test_gender_salary_has_two_groups_of_fifty(dataset):
    result = GenderSalaryView().build(dataset, SelectorState(plot_type=PlotType.GENDER_SALARY))
    traces = {trace.name: trace for trace in result["figure"].data}
    assert set(traces) == {"Male", "Female"}
    assert all(trace.type == "box" for trace in traces.values())
    assert len(traces["Male"].y) == GENDER_ROWS
    assert len(traces["Female"].y) == GENDER_ROWS


def test_gender_burnout_is_box_plot_over_all_rows(dataset):
    result = GenderBurnoutView().build(dataset, SelectorState(plot_type=PlotType.GENDER_BURNOUT))
    assert result["rows"] == 100
    assert all(trace.type == "box" for trace in result["figure"].data)
    assert sum(len(trace.y) for trace in result["figure"].data) == 100


@pytest.mark.parametrize("ethnicity", list(Ethnicity))
def test_ethnicity_view_filters_to_selection(dataset, ethnicity):
    state = SelectorState(plot_type=PlotType.ETHNICITY_BURNOUT, ethnicity=ethnicity)
    result = EthnicityBurnoutView().build(dataset, state)

    frame = result["frame"]
    assert len(frame) == BLOCK_ROWS
    assert set(frame["ethnicity"]) == {ethnicity.value}
    assert [trace.name for trace in result["figure"].data] == [ethnicity.value]
    assert ethnicity.value in result["title"]


def test_ethnicity_view_uses_fixed_palette(dataset):
    state = SelectorState(plot_type=PlotType.ETHNICITY_BURNOUT, ethnicity=Ethnicity.LATINO)
    first = EthnicityBurnoutView().build(dataset, state)["figure"].data[0]
    cultural = CulturalInfluenceView().build(dataset, state)["figure"]
    latino = next(trace for trace in cultural.data if trace.name == Ethnicity.LATINO.value)
    assert first.marker.color == latino.marker.color


def test_industry_view_rotates_labels_and_keeps_rows(dataset):
    result = IndustryBurnoutView().build(dataset, SelectorState(plot_type=PlotType.INDUSTRY_BURNOUT))
    figure = result["figure"]
    assert figure.layout.xaxis.tickangle == TICK_ANGLE == -45
    assert len(figure.data) == 5
    assert sum(len(trace.y) for trace in figure.data) == 100


@pytest.mark.parametrize("ethnicity", list(Ethnicity))
def test_cultural_influence_has_five_bars_regardless_of_selection(dataset, ethnicity):
    state = SelectorState(plot_type=PlotType.CULTURAL_INFLUENCE, ethnicity=ethnicity)
    figure = CulturalInfluenceView().build(dataset, state)["figure"]
    assert sum(len(trace.x) for trace in figure.data) == 5
    assert {trace.name for trace in figure.data} == {e.value for e in Ethnicity}


def test_placeholder_is_labelled_and_empty():
    result = PlaceholderView(requested="Pie Chart").build()
    assert result["rows"] == 0
    assert len(result["figure"].data) == 0
    assert "Pie Chart" in result["figure"].layout.annotations[0].text
