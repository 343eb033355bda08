from __future__ import annotations

import pytest

from burnout_dashboard.domain.models import Ethnicity, PlotType, SelectorState
from burnout_dashboard.panels import (
    RADIUS_UNITS_PER_PIXEL,
    TABLE_COLUMNS,
    build_map_figure,
    build_table,
    info_text,
    map_markers,
    table_records,
)
from burnout_dashboard.renderer import render_state, render_view

CITY_ROWS = 5


def test_table_records_cover_every_person(dataset):
    records = table_records(dataset)
    assert len(records) == 100
    assert list(records[0]) == list(TABLE_COLUMNS)
    assert isinstance(records[0]["salary"], int)


def test_table_is_paginated(dataset):
    table = build_table(dataset, page_size=10)
    assert table.page_size == 10
    assert table.sort_action == "native"
    assert len(table.data) == 100
    assert [c["id"] for c in table.columns] == list(TABLE_COLUMNS)


def test_table_is_independent_of_selector_state(dataset):
    before = table_records(dataset)
    for plot_type in PlotType:
        for ethnicity in Ethnicity:
            render_state(dataset, SelectorState(plot_type=plot_type, ethnicity=ethnicity))
    assert table_records(dataset) == before


def test_map_markers_scale_radius_linearly(dataset):
    markers = map_markers(dataset, radius_scale=1000.0)
    assert len(markers) == CITY_ROWS
    assert list(markers["radius"]) == [c.burnout * 1000.0 for c in dataset.cities]


def test_map_figure_has_one_marker_per_city(dataset):
    figure = build_map_figure(dataset)
    assert sum(len(trace.lat) for trace in figure.data) == CITY_ROWS
    assert len(figure.data[0].marker.size) == CITY_ROWS
    hover = figure.data[0].hovertemplate
    assert "Reason" in hover
    assert "Burnout" in hover


def test_info_text_for_ethnicity_view(dataset):
    result = render_view(dataset, "Burnout by Ethnicity", "Latino")
    assert info_text(result) == "Burnout by Ethnicity: 20 Latino respondents."


@pytest.mark.parametrize(
    "plot_type",
    [p for p in PlotType if p is not PlotType.ETHNICITY_BURNOUT],
)
def test_info_text_notes_when_ethnicity_is_ignored(dataset, plot_type):
    result = render_view(dataset, plot_type.value, "Asian")
    text = info_text(result)
    assert text.startswith(plot_type.value)
    assert "does not apply" in text


def test_info_text_for_placeholder(dataset):
    result = render_view(dataset, "Pie Chart", "Asian")
    assert info_text(result) == "No chart available for 'Pie Chart'."


def _drawn_diameters(figure) -> list[float]:
    marker = figure.data[0].marker
    return [size / marker.sizeref for size in marker.size]


def test_map_marker_size_is_linear_in_burnout(dataset):
    figure = build_map_figure(dataset, radius_scale=1000.0)
    marker = figure.data[0].marker
    assert marker.sizemode == "diameter"

    burnouts = [c.burnout for c in dataset.cities]
    diameters = _drawn_diameters(figure)
    for burnout, diameter in zip(burnouts, diameters):
        assert diameter / diameters[0] == pytest.approx(burnout / burnouts[0])
    assert diameters[0] == pytest.approx(2 * burnouts[0] * 1000.0 / RADIUS_UNITS_PER_PIXEL)


def test_map_radius_scale_changes_drawn_size(dataset):
    small = _drawn_diameters(build_map_figure(dataset, radius_scale=500.0))
    large = _drawn_diameters(build_map_figure(dataset, radius_scale=1000.0))
    for low, high in zip(small, large):
        assert high == pytest.approx(2 * low)
