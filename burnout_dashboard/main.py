from __future__ import annotations

import sys
from typing import Optional

import typer

from burnout_dashboard.config import get_settings
from burnout_dashboard.dataset import generate_dataset
from burnout_dashboard.renderer import available_views, resolve_view
from burnout_dashboard.reporter import print_summary
from burnout_dashboard.utils.logging import configure_logging

app = typer.Typer(help="Workplace burnout dashboard CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | server={settings.host}:{settings.port} debug={settings.debug} | "
        f"seed={settings.dataset_seed} page_size={settings.table_page_size} "
        f"radius_scale={settings.map_radius_scale}"
    )


@app.command()
def views() -> None:
    """
    List the plot types the dashboard can render.
    """
    for name in available_views():
        typer.echo(f"{name}: {resolve_view(name).description}")


@app.command()
def summary(
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the generated snapshot (default from settings).",
    ),
) -> None:
    """
    Generate a snapshot and print its category breakdown.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    data = generate_dataset(seed=seed if seed is not None else settings.dataset_seed)
    print_summary(data)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default from settings)."),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Dash debug mode."),
) -> None:
    """
    Run the dashboard web server.
    """
    from burnout_dashboard.app import create_app

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    dash_app = create_app(settings)
    dash_app.run(
        host=host or settings.host,
        port=port or settings.port,
        debug=settings.debug if debug is None else debug,
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
