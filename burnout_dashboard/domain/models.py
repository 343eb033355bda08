"""
Domain models for the burnout dashboard.

Defines the closed enumerations the selectors and the generator share, the
frozen record schemas for the person and city tables, and the selector state
that fully determines the rendered chart.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class Industry(str, Enum):
    FINANCE = "Finance"
    TECH = "Tech"
    MARKETING = "Marketing"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"


class Ethnicity(str, Enum):
    ASIAN = "Asian"
    MIDDLE_EASTERN = "Middle Eastern"
    LATINO = "Latino"
    AFRICAN_AMERICAN = "African American"
    WESTERN = "Western"


class PlotType(str, Enum):
    """Chart choices offered by the plot-type selector, in display order."""

    GENDER_SALARY = "Gender vs. Salary"
    GENDER_BURNOUT = "Gender vs. Burnout Percentage"
    ETHNICITY_BURNOUT = "Burnout by Ethnicity"
    INDUSTRY_BURNOUT = "Industry Burnout"
    CULTURAL_INFLUENCE = "Cultural Influence"


class PersonRecord(BaseModel):
    """
    One sampled survey respondent.
    """

    gender: Gender = Field(..., description="Respondent gender block.")
    age: int = Field(..., ge=22, le=45, description="Age in whole years.")
    salary: float = Field(..., description="Annual salary.")
    industry: Industry = Field(..., description="Industry block.")
    burnout_percentage: float = Field(
        ..., ge=0.0, le=100.0, description="Self-reported burnout (percent)."
    )
    ethnicity: Ethnicity = Field(..., description="Ethnicity block.")
    burnout_ethnicity: int = Field(
        ..., ge=0, le=100, description="Burnout score from the per-ethnicity literal series."
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class CityRecord(BaseModel):
    """
    A city marker on the map panel.
    """

    city: str = Field(..., min_length=1, description="City name (unique key).")
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    burnout: int = Field(..., ge=0, le=100, description="Burnout percentage.")
    reason: str = Field(..., description="Free-text explanation.")

    model_config = {"frozen": True}


class SelectorState(BaseModel):
    """
    Current dropdown values. The ethnicity is kept even when the active plot
    ignores it, so switching back restores the previous choice.
    """

    plot_type: PlotType = PlotType.GENDER_SALARY
    ethnicity: Ethnicity = Ethnicity.ASIAN

    model_config = {"frozen": True}

    def with_plot_type(self, plot_type: PlotType | str) -> SelectorState:
        return self.model_copy(update={"plot_type": PlotType(plot_type)})

    def with_ethnicity(self, ethnicity: Ethnicity | str) -> SelectorState:
        return self.model_copy(update={"ethnicity": Ethnicity(ethnicity)})


__all__ = [
    "CityRecord",
    "Ethnicity",
    "Gender",
    "Industry",
    "PersonRecord",
    "PlotType",
    "SelectorState",
]
