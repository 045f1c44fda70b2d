"""CLI commands for the wedding site API."""

import asyncio

import typer
import uvicorn

from src.config.settings import settings
from src.sponsors.client import RemoteUnavailableError, ScriptSponsorStore
from src.sponsors.fallback import fallback_sponsors
from src.sponsors.schema import PrincipalSponsor

app = typer.Typer(help="CLI commands for the wedding site API")


def _print_sponsors(sponsors: list[dict]) -> None:
    for index, sponsor in enumerate(sponsors, start=1):
        male = sponsor.get("MalePrincipalSponsor") or "-"
        female = sponsor.get("FemalePrincipalSponsor") or "-"
        typer.secho(f"  {index:>2}. {male} & {female}", fg=typer.colors.BLUE)


@app.command()
def serve(
    host: str = typer.Option(settings.app_host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.app_port, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API with uvicorn."""
    uvicorn.run("src.main:app", host=host, port=port, reload=reload)


@app.command()
def sponsors():
    """List principal sponsors from the sponsor sheet, or the bundled list if it is down."""
    store = ScriptSponsorStore()
    try:
        rows = asyncio.run(store.list_sponsors())
        typer.secho(f"{len(rows)} principal sponsors in the sponsor sheet", fg=typer.colors.GREEN)
    except RemoteUnavailableError as e:
        typer.secho(f"Sponsor sheet unavailable: {e}", fg=typer.colors.YELLOW)
        rows = [sponsor.model_dump() for sponsor in fallback_sponsors()]
        typer.secho(f"{len(rows)} bundled principal sponsors", fg=typer.colors.GREEN)
    _print_sponsors(rows)


@app.command()
def fallback():
    """Print the bundled sponsor list as the API would serve it."""
    rows = [sponsor.model_dump() for sponsor in fallback_sponsors()]
    typer.secho(f"{len(rows)} bundled principal sponsors", fg=typer.colors.GREEN)
    _print_sponsors(rows)


@app.command()
def add_sponsor(
    male: str = typer.Option(..., "--male", "-m", help="Male principal sponsor"),
    female: str = typer.Option("", "--female", "-f", help="Female principal sponsor"),
):
    """Append a sponsor pair to the sponsor sheet."""
    sponsor = PrincipalSponsor(
        MalePrincipalSponsor=male.strip(),
        FemalePrincipalSponsor=female.strip(),
    )
    if not sponsor.MalePrincipalSponsor:
        typer.secho("MalePrincipalSponsor is required", fg=typer.colors.RED)
        raise typer.Exit(1)

    try:
        result = asyncio.run(ScriptSponsorStore().create_sponsor(sponsor))
    except RemoteUnavailableError as e:
        typer.secho(f"Failed to add principal sponsor: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Principal sponsor added!", fg=typer.colors.GREEN)
    typer.secho(f"  Response: {result}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
