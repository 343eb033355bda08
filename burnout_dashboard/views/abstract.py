"""
Abstract view interfaces and result contracts for the burnout dashboard.

Concrete views (one per PlotType, plus the placeholder) implement the PlotView
protocol and return a ViewResult TypedDict so the renderer and the Dash
callbacks handle every chart the same way.
"""

from __future__ import annotations

import abc
from typing import Dict, Optional, Protocol, TypedDict, runtime_checkable

import pandas as pd
import plotly.graph_objects as go

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import Ethnicity, PlotType, SelectorState

# Fixed palette shared by every ethnicity-keyed chart.
ETHNICITY_COLORS: Dict[str, str] = {
    Ethnicity.ASIAN.value: "#1f77b4",
    Ethnicity.MIDDLE_EASTERN.value: "#ff7f0e",
    Ethnicity.LATINO.value: "#2ca02c",
    Ethnicity.AFRICAN_AMERICAN.value: "#d62728",
    Ethnicity.WESTERN.value: "#9467bd",
}

PLOT_TEMPLATE = "plotly_white"


class ViewResult(TypedDict, total=False):
    """
    Output of a single render.

    `frame` is the exact data handed to the charting call, so the filtering a
    view performs can be checked without inspecting the figure.
    """

    figure: go.Figure
    frame: pd.DataFrame
    title: str
    rows: int
    notes: Optional[str]
    state: Optional[SelectorState]


@runtime_checkable
class PlotView(Protocol):
    """
    Common interface all plot views must implement.

    Attributes
    ----------
    plot_type : PlotType | None
        The selector value this view answers to. None for the placeholder.
    title : str
        Chart title shown above the figure.
    description : str
        A human-friendly summary of what the chart shows.
    uses_ethnicity : bool
        Whether the ethnicity selector affects the output.
    """

    plot_type: Optional[PlotType]
    title: str
    description: str
    uses_ethnicity: bool

    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:
        """
        Derive the rows this chart needs from the snapshot and plot them.

        Parameters
        ----------
        data : DashboardData
            The immutable snapshot to read from.
        state : SelectorState
            Current selector values.

        Returns
        -------
        ViewResult
            The figure plus the frame it was built from.
        """
        ...


class AbstractPlotView(abc.ABC):
    """
    ABC helper for class-based views.

    Subclasses set the class attributes and implement `build`.
    """

    plot_type: Optional[PlotType] = None
    title: str
    description: str
    uses_ethnicity: bool = False

    @abc.abstractmethod
    def build(self, data: DashboardData, state: SelectorState) -> ViewResult:  # pragma: no cover - interface only
        """Render the view for the given snapshot and selector state."""
        raise NotImplementedError

    def _finish(
        self,
        figure: go.Figure,
        frame: pd.DataFrame,
        title: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> ViewResult:
        title = title or self.title
        figure.update_layout(title=title, template=PLOT_TEMPLATE)
        return ViewResult(
            figure=figure,
            frame=frame,
            title=title,
            rows=len(frame),
            notes=notes,
        )


__all__ = [
    "AbstractPlotView",
    "ETHNICITY_COLORS",
    "PlotView",
    "ViewResult",
]
