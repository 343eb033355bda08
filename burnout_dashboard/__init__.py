"""
Workplace burnout dashboard.

A single-page Dash app that renders a synthetic respondent table through
five chart types, a city map, and a paginated table:

- Gender vs. salary and gender vs. burnout box plots
- Burnout by ethnicity for the selected ethnicity
- Per-respondent burnout grouped by industry
- Parental pressure by ethnicity
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from burnout_dashboard.config import Settings, get_settings
from burnout_dashboard.dataset import DashboardData, generate_dataset
from burnout_dashboard.domain.models import Ethnicity, PlotType, SelectorState
from burnout_dashboard.renderer import available_views, render_state, render_view
from burnout_dashboard.utils.logging import configure_logging, get_logger
from burnout_dashboard.views.abstract import AbstractPlotView, PlotView, ViewResult

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data
    "DashboardData",
    "Ethnicity",
    "PlotType",
    "SelectorState",
    "generate_dataset",
    # Rendering
    "available_views",
    "render_state",
    "render_view",
    # View abstractions
    "AbstractPlotView",
    "PlotView",
    "ViewResult",
    # Logging
    "configure_logging",
    "get_logger",
]
