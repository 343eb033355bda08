from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from burnout_dashboard.dataset import DashboardData


def summarize_people(data: DashboardData) -> List[Dict[str, Any]]:
    """
    Per-category row counts and means for the person table.

    Returns one dict per (column, category) pair, in the order the categories
    appear in the table.
    """
    frame = data.people_frame()
    summary: List[Dict[str, Any]] = []
    for column in ("gender", "industry", "ethnicity"):
        grouped = frame.groupby(column, sort=False)
        for category, rows in grouped:
            summary.append(
                {
                    "column": column,
                    "category": category,
                    "rows": len(rows),
                    "mean_salary": round(float(rows["salary"].mean()), 2),
                    "mean_burnout": round(float(rows["burnout_percentage"].mean()), 2),
                }
            )
    return summary


def print_summary(data: DashboardData, console: Optional[Console] = None) -> None:
    """
    Render the snapshot as rich tables: category breakdown, then cities.
    """
    console = console or Console()

    if not data.people:
        console.print("[yellow]No respondents to display.[/yellow]")
        return

    seed = "unseeded" if data.seed is None else f"seed={data.seed}"
    table = Table(
        title=f"Respondents ({len(data.people)} rows, {seed})",
        box=box.ROUNDED,
    )
    table.add_column("Column", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Rows", justify="right", style="blue")
    table.add_column("Mean Salary", justify="right", style="green")
    table.add_column("Mean Burnout (%)", justify="right", style="yellow")

    for row in summarize_people(data):
        table.add_row(
            row["column"],
            row["category"],
            str(row["rows"]),
            f"{row['mean_salary']:,.0f}",
            f"{row['mean_burnout']:.1f}",
        )
    console.print(table)

    cities = Table(title="Cities", box=box.ROUNDED)
    cities.add_column("City", style="cyan", no_wrap=True)
    cities.add_column("Burnout (%)", justify="right", style="red")
    cities.add_column("Reason")
    for city in sorted(data.cities, key=lambda c: c.burnout, reverse=True):
        cities.add_row(city.city, str(city.burnout), city.reason)
    console.print(cities)


__all__ = ["print_summary", "summarize_people"]
