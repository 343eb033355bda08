"""
Synthetic dataset generation for the burnout dashboard.

Builds the immutable snapshot every view and panel reads from: 100 sampled
respondents laid out in contiguous category blocks, a fixed five-city table,
and a fixed per-ethnicity parental pressure table.

Usage:
    from burnout_dashboard.dataset import generate_dataset

    data = generate_dataset(seed=42)
    people = data.people_frame()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd

from burnout_dashboard.domain.models import (
    CityRecord,
    Ethnicity,
    Gender,
    Industry,
    PersonRecord,
)
from burnout_dashboard.utils.logging import get_logger

log = get_logger(__name__)

PERSON_ROWS = 100
AGE_RANGE = (22, 45)

SALARY_MEAN: Dict[Gender, float] = {
    Gender.MALE: 53_000.0,
    Gender.FEMALE: 45_000.0,
}
SALARY_SPREAD = 4_000.0

INDUSTRY_BURNOUT_RANGE: Dict[Industry, Tuple[float, float]] = {
    Industry.FINANCE: (30.0, 70.0),
    Industry.TECH: (40.0, 75.0),
    Industry.MARKETING: (25.0, 60.0),
    Industry.HEALTHCARE: (35.0, 80.0),
    Industry.EDUCATION: (30.0, 65.0),
}

# Five consecutive values per ethnicity, in Ethnicity declaration order.
BURNOUT_ETHNICITY_SERIES: Tuple[int, ...] = (
    68, 72, 65, 75, 70,
    62, 66, 59, 64, 61,
    57, 60, 63, 55, 58,
    61, 65, 59, 67, 63,
    48, 52, 45, 50, 47,
)

PARENTAL_PRESSURE: Dict[Ethnicity, int] = {
    Ethnicity.ASIAN: 78,
    Ethnicity.MIDDLE_EASTERN: 72,
    Ethnicity.LATINO: 64,
    Ethnicity.AFRICAN_AMERICAN: 58,
    Ethnicity.WESTERN: 41,
}

CITIES: Tuple[CityRecord, ...] = (
    CityRecord(
        city="New York",
        lat=40.7128,
        lng=-74.0060,
        burnout=72,
        reason="Long commutes and a finance-heavy job market push working hours up.",
    ),
    CityRecord(
        city="San Francisco",
        lat=37.7749,
        lng=-122.4194,
        burnout=68,
        reason="Startup culture and housing costs keep pressure on tech workers.",
    ),
    CityRecord(
        city="Chicago",
        lat=41.8781,
        lng=-87.6298,
        burnout=55,
        reason="Mixed industry base; winter months show the sharpest rise.",
    ),
    CityRecord(
        city="Houston",
        lat=29.7604,
        lng=-95.3698,
        burnout=60,
        reason="Healthcare staffing shortages across the medical center.",
    ),
    CityRecord(
        city="Seattle",
        lat=47.6062,
        lng=-122.3321,
        burnout=64,
        reason="Large tech employers with on-call rotations and crunch cycles.",
    ),
)


def _blocks(categories, rows: int) -> list:
    """Lay categories out in equal contiguous blocks covering `rows` rows."""
    size, remainder = divmod(rows, len(categories))
    if remainder:
        raise ValueError(f"{rows} rows cannot be split evenly across {len(categories)} categories")
    return [category for category in categories for _ in range(size)]


def burnout_ethnicity_values(rows: int = PERSON_ROWS) -> list[int]:
    """
    Assign the literal burnout series to the ethnicity blocks.

    The series is split into one group of five per ethnicity; row ``i`` of an
    ethnicity block takes ``group[i % 5]`` so each row only ever carries a
    value from its own ethnicity's group.
    """
    ethnicities = list(Ethnicity)
    group_size = len(BURNOUT_ETHNICITY_SERIES) // len(ethnicities)
    block_size = rows // len(ethnicities)

    values: list[int] = []
    for index, _ in enumerate(ethnicities):
        group = BURNOUT_ETHNICITY_SERIES[index * group_size : (index + 1) * group_size]
        values.extend(group[i % group_size] for i in range(block_size))
    return values


@dataclass(frozen=True)
class DashboardData:
    """
    Immutable snapshot of every table the dashboard renders.

    Frame helpers return fresh DataFrames; mutating them leaves the snapshot
    untouched.
    """

    people: Tuple[PersonRecord, ...]
    cities: Tuple[CityRecord, ...]
    parental_pressure: Tuple[Tuple[Ethnicity, int], ...]
    seed: Optional[int] = None

    def people_frame(self) -> pd.DataFrame:
        return pd.DataFrame([p.model_dump(mode="json") for p in self.people])

    def cities_frame(self) -> pd.DataFrame:
        return pd.DataFrame([c.model_dump(mode="json") for c in self.cities])

    def parental_pressure_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"ethnicity": ethnicity.value, "parental_pressure": pressure}
                for ethnicity, pressure in self.parental_pressure
            ]
        )


def generate_people(rng: np.random.Generator, rows: int = PERSON_ROWS) -> Tuple[PersonRecord, ...]:
    genders = _blocks(list(Gender), rows)
    industries = _blocks(list(Industry), rows)
    ethnicities = _blocks(list(Ethnicity), rows)
    burnout_by_ethnicity = burnout_ethnicity_values(rows)

    low, high = AGE_RANGE
    ages = rng.integers(low, high, size=rows, endpoint=True)

    people = []
    for i in range(rows):
        gender = genders[i]
        industry = industries[i]
        burnout_low, burnout_high = INDUSTRY_BURNOUT_RANGE[industry]
        people.append(
            PersonRecord(
                gender=gender,
                age=int(ages[i]),
                salary=float(rng.normal(SALARY_MEAN[gender], SALARY_SPREAD)),
                industry=industry,
                burnout_percentage=float(rng.uniform(burnout_low, burnout_high)),
                ethnicity=ethnicities[i],
                burnout_ethnicity=burnout_by_ethnicity[i],
            )
        )
    return tuple(people)


def generate_dataset(seed: Optional[int] = None) -> DashboardData:
    """
    Generate a complete dashboard snapshot.

    Parameters
    ----------
    seed : int | None
        Seed for numpy's random Generator. None draws fresh entropy, so two
        unseeded snapshots differ.
    """
    rng = np.random.default_rng(seed)
    data = DashboardData(
        people=generate_people(rng),
        cities=CITIES,
        parental_pressure=tuple(PARENTAL_PRESSURE.items()),
        seed=seed,
    )
    log.info(
        "Dataset generated",
        extra={"people": len(data.people), "cities": len(data.cities), "seed": seed},
    )
    return data


__all__ = [
    "CITIES",
    "DashboardData",
    "PARENTAL_PRESSURE",
    "burnout_ethnicity_values",
    "generate_dataset",
    "generate_people",
]
