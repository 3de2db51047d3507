"""CLI interface for the interactive catalog menu."""

import logging

import typer

from menuwalk import ModelLoadError, load_model
from menuwalk.config import get_settings
from menuwalk.reporter import report
from menuwalk.walker import run_menu

logger = logging.getLogger(__name__)

app = typer.Typer(help="Walk a product catalog menu and summarize the selections")


@app.command()
def main(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="JSON file with the menu selection hierarchy.",
    ),
    link_base: str | None = typer.Option(
        None,
        "--link-base",
        help="Base URL for the product summary page link.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
):
    """Prompt through the catalog tiers and print a summary of the choices."""
    settings = get_settings()

    level = logging.getLevelName((log_level or settings.log_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=settings.log_format,
    )

    catalog_path = model or settings.catalog_path

    typer.echo("START")

    try:
        catalog = load_model(catalog_path)
    except ModelLoadError as e:
        logger.error(f"Could not load {catalog_path}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    selections = run_menu(catalog)

    if not selections:
        typer.echo("No selections made")
        return

    report(selections, link_base or settings.link_base_url)

    typer.echo("END")


if __name__ == "__main__":
    app()
