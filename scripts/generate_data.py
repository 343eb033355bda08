"""
Data export script for the burnout dashboard.

Generates one snapshot (optionally seeded) and writes the respondent and city
tables as CSV so the sample data can be inspected outside the dashboard.
"""

from __future__ import annotations

import csv
import sys
import time
from pathlib import Path

import typer

from burnout_dashboard.dataset import DashboardData, generate_dataset

app = typer.Typer(help="Generate the synthetic dashboard tables and write them to CSV.")

PEOPLE_HEADER = [
    "gender",
    "age",
    "salary",
    "industry",
    "burnout_percentage",
    "ethnicity",
    "burnout_ethnicity",
]
CITIES_HEADER = ["city", "lat", "lng", "burnout", "reason"]


def _write_people_csv(csv_path: Path, data: DashboardData) -> int:
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(PEOPLE_HEADER)
        for person in data.people:
            writer.writerow(
                [
                    person.gender.value,
                    person.age,
                    f"{person.salary:.2f}",
                    person.industry.value,
                    f"{person.burnout_percentage:.2f}",
                    person.ethnicity.value,
                    person.burnout_ethnicity,
                ]
            )
    return len(data.people)


def _write_cities_csv(csv_path: Path, data: DashboardData) -> int:
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CITIES_HEADER)
        for city in data.cities:
            writer.writerow([city.city, city.lat, city.lng, city.burnout, city.reason])
    return len(data.cities)


def export_dataset(output_dir: Path, seed: int | None = None) -> tuple[Path, Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    data = generate_dataset(seed=seed)
    people_path = output_dir / "people.csv"
    cities_path = output_dir / "cities.csv"
    _write_people_csv(people_path, data)
    _write_cities_csv(cities_path, data)
    return people_path, cities_path


@app.command()
def main(
    output_dir: Path = typer.Option(
        Path("data"),
        "--output-dir",
        "-o",
        help="Directory to write people.csv and cities.csv into.",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Deterministic RNG seed (unseeded when omitted).",
    ),
) -> None:
    """
    Generate one snapshot and write its tables to CSV.
    """
    start = time.perf_counter()
    typer.echo(f"Generating snapshot -> {output_dir} (seed={seed})")
    people_path, cities_path = export_dataset(output_dir, seed=seed)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {people_path} and {cities_path} in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
