"""
Views package for the burnout dashboard.

Re-exports the view interfaces and the concrete view classes so downstream
code can import from `burnout_dashboard.views` directly.
"""

from burnout_dashboard.views.abstract import (
    ETHNICITY_COLORS,
    AbstractPlotView,
    PlotView,
    ViewResult,
)
from burnout_dashboard.views.cultural_influence import CulturalInfluenceView
from burnout_dashboard.views.ethnicity_burnout import EthnicityBurnoutView
from burnout_dashboard.views.gender_burnout import GenderBurnoutView
from burnout_dashboard.views.gender_salary import GenderSalaryView
from burnout_dashboard.views.industry_burnout import IndustryBurnoutView
from burnout_dashboard.views.placeholder import PlaceholderView

__all__ = [
    # Abstracts
    "AbstractPlotView",
    "ETHNICITY_COLORS",
    "PlotView",
    "ViewResult",
    # Concrete views
    "CulturalInfluenceView",
    "EthnicityBurnoutView",
    "GenderBurnoutView",
    "GenderSalaryView",
    "IndustryBurnoutView",
    "PlaceholderView",
]
