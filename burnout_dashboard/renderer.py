"""
View selection and rendering for the burnout dashboard.

Maps the current selector state to exactly one registered view and renders it
against the snapshot passed in. The registry is closed over PlotType: building
it checks that every variant has a view, so a new PlotType without a view
fails at startup rather than rendering nothing.

Usage:
    from burnout_dashboard.renderer import render_view

    result = render_view(data, "Burnout by Ethnicity", "Asian")
    result["figure"].show()
"""

from __future__ import annotations

from typing import Callable, Dict, List

from burnout_dashboard.dataset import DashboardData
from burnout_dashboard.domain.models import Ethnicity, PlotType, SelectorState
from burnout_dashboard.utils.logging import get_logger
from burnout_dashboard.views.abstract import PlotView, ViewResult
from burnout_dashboard.views.cultural_influence import CulturalInfluenceView
from burnout_dashboard.views.ethnicity_burnout import EthnicityBurnoutView
from burnout_dashboard.views.gender_burnout import GenderBurnoutView
from burnout_dashboard.views.gender_salary import GenderSalaryView
from burnout_dashboard.views.industry_burnout import IndustryBurnoutView
from burnout_dashboard.views.placeholder import PlaceholderView

log = get_logger(__name__)


def _check_exhaustive(factories: Dict[PlotType, Callable[[], PlotView]]) -> None:
    missing = [p.value for p in PlotType if p not in factories]
    if missing:
        raise RuntimeError(f"No view registered for plot type(s): {', '.join(missing)}")


def _view_factories() -> Dict[PlotType, Callable[[], PlotView]]:
    """Registry of available views."""
    factories: Dict[PlotType, Callable[[], PlotView]] = {
        PlotType.GENDER_SALARY: lambda: GenderSalaryView(),
        PlotType.GENDER_BURNOUT: lambda: GenderBurnoutView(),
        PlotType.ETHNICITY_BURNOUT: lambda: EthnicityBurnoutView(),
        PlotType.INDUSTRY_BURNOUT: lambda: IndustryBurnoutView(),
        PlotType.CULTURAL_INFLUENCE: lambda: CulturalInfluenceView(),
    }
    _check_exhaustive(factories)
    return factories


def available_views() -> List[str]:
    """List plot type values in selector order."""
    factories = _view_factories()
    return [p.value for p in PlotType if p in factories]


def resolve_view(plot_type: PlotType | str) -> PlotView:
    factories = _view_factories()
    try:
        key = PlotType(plot_type)
    except ValueError:
        raise ValueError(
            f"Unknown plot type '{plot_type}'. Available: {', '.join(available_views())}"
        ) from None
    return factories[key]()


def parse_state(plot_type: PlotType | str, ethnicity: Ethnicity | str) -> SelectorState:
    """
    Build a SelectorState from raw selector values.

    Raises
    ------
    ValueError
        If either value is outside its enumeration.
    """
    try:
        return SelectorState(plot_type=PlotType(plot_type), ethnicity=Ethnicity(ethnicity))
    except ValueError as exc:
        raise ValueError(f"Invalid selector state ({plot_type!r}, {ethnicity!r}): {exc}") from exc


def render_state(data: DashboardData, state: SelectorState) -> ViewResult:
    """
    Render the view registered for `state.plot_type`.
    """
    view = resolve_view(state.plot_type)
    result = view.build(data, state)
    result["state"] = state
    log.debug(
        f"[RENDER] {state.plot_type.value}",
        extra={
            "plot_type": state.plot_type.value,
            "ethnicity": state.ethnicity.value,
            "rows": result.get("rows"),
        },
    )
    return result


def render_view(data: DashboardData, plot_type: str, ethnicity: str) -> ViewResult:
    """
    Render raw selector values coming from the UI.

    Never raises for bad selector values: anything that does not parse is
    logged and rendered as the placeholder view.
    """
    try:
        state = parse_state(plot_type, ethnicity)
    except ValueError:
        log.warning(
            "[RENDER FALLBACK] unrecognised selector state",
            extra={"plot_type": plot_type, "ethnicity": ethnicity},
        )
        requested = ethnicity if plot_type in available_views() else plot_type
        result = PlaceholderView(requested=str(requested)).build(data)
        result["state"] = None
        return result
    return render_state(data, state)


__all__ = [
    "available_views",
    "parse_state",
    "render_state",
    "render_view",
    "resolve_view",
]
