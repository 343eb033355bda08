"""
Domain package for the burnout dashboard.

Exports the closed enumerations and record schemas used by the generator,
the views, and the panels. Keep this package focused on data definitions.
"""

from burnout_dashboard.domain.models import (
    CityRecord,
    Ethnicity,
    Gender,
    Industry,
    PersonRecord,
    PlotType,
    SelectorState,
)

__all__ = [
    "CityRecord",
    "Ethnicity",
    "Gender",
    "Industry",
    "PersonRecord",
    "PlotType",
    "SelectorState",
]
