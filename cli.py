"""CLI commands for protest map management."""

import asyncio
from datetime import datetime

import typer

from protestmap.config.database import run_migrations_online
from protestmap.config.settings import settings
from protestmap.map_view.markers import format_popup_date
from protestmap.protests.dtos import StoreError
from protestmap.protests.features.create_protest.write_model import (
    SqlProtestCreateWriteModel,
)
from protestmap.protests.repository.read_models import SqlProtestReadModel

app = typer.Typer(help="CLI commands for protest map management")


@app.command()
def init_db():
    """Create or upgrade the protests table by running the migrations."""
    asyncio.run(run_migrations_online())
    typer.secho("Database is up to date.", fg=typer.colors.GREEN)


@app.command()
def list_protests():
    """Print every stored protest."""
    try:
        protests = asyncio.run(SqlProtestReadModel().list_protests())
    except StoreError as e:
        typer.secho(f"Could not load protests: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    if not protests:
        typer.secho("No protests stored yet.", fg=typer.colors.YELLOW)
        return

    for protest in protests:
        typer.secho(f"#{protest.id} {protest.name}", fg=typer.colors.GREEN)
        typer.secho(f"  Date: {format_popup_date(protest.date)}", fg=typer.colors.BLUE)
        if protest.location.is_complete:
            typer.secho(
                f"  Location: {protest.location.lat:.4f}, {protest.location.lng:.4f}",
                fg=typer.colors.CYAN,
            )
        else:
            typer.secho("  Location: not set", fg=typer.colors.YELLOW)
        typer.secho(f"  {protest.description}")


@app.command()
def add_protest(
    name: str = typer.Argument(
        ...,
        help="Name of the protest",
    ),
    description: str = typer.Argument(
        ...,
        help="Description shown in the marker popup",
    ),
    lat: float = typer.Option(
        ...,
        "--lat",
        help="Latitude",
    ),
    lng: float = typer.Option(
        ...,
        "--lng",
        help="Longitude",
    ),
    date: datetime = typer.Option(
        None,
        "--date",
        "-d",
        help="Start date, defaults to now",
    ),
):
    """Add a protest straight to the store."""
    write_model = SqlProtestCreateWriteModel()
    try:
        protest_id = asyncio.run(
            write_model.create_protest(
                name=name,
                description=description,
                lat=lat,
                lng=lng,
                start_date=date or datetime.now(),
            )
        )
    except StoreError as e:
        typer.secho(f"Could not add protest: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Protest added!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {protest_id}", fg=typer.colors.CYAN)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API and map page with uvicorn."""
    import uvicorn

    uvicorn.run(
        "protestmap.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
