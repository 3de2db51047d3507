"""Post-selection summary output."""

import logging
from typing import Any, Iterable, Sequence

import typer
from tabulate import tabulate

from .formatting import format_currency
from .model import CatalogNode

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ("id", "name", "description", "price")
INDEX_COLUMN = "(index)"


def render_table(rows: Iterable[dict[str, Any]], columns: Sequence[str]) -> str:
    """Render rows as a text table with an index column then the given columns."""
    body = [
        [index, *(row.get(column) for column in columns)]
        for index, row in enumerate(rows)
    ]
    return tabulate(
        body,
        headers=[INDEX_COLUMN, *columns],
        tablefmt="simple",
        missingval="",
        disable_numparse=True,
    )


def display_rows(selections: list[CatalogNode]) -> list[dict[str, Any]]:
    """Copy each selection with its price formatted as currency."""
    return [
        {
            **item.model_dump(exclude={"children"}),
            "price": format_currency(item.price),
        }
        for item in selections
    ]


def total_price(selections: list[CatalogNode]) -> float:
    """Sum the raw prices of all selections."""
    total = 0.0
    for item in selections:
        total += item.price
    return total


def create_link(selections: list[CatalogNode], base_url: str) -> str | None:
    """Create a URL with the ids of all chosen items."""
    if not selections:
        return None

    ids = ",".join(str(item.id) for item in selections)
    return f"{base_url}?ids={ids}"


def report(
    selections: list[CatalogNode],
    base_url: str = "https://www.example.com/products",
) -> None:
    """Print the selection table, final selection, totals and summary link."""
    if not selections:
        raise ValueError("report requires at least one selection")

    typer.echo("\nAll selections:")
    typer.echo(render_table(display_rows(selections), SUMMARY_COLUMNS))

    total = total_price(selections)
    final = selections[-1]
    logger.info(f"Reporting {len(selections)} selections totalling {total}")

    typer.echo(
        f"The final selection made was {final.name} for {format_currency(final.price) or ''}"
    )
    typer.echo(f"Total selections: {len(selections)}")
    typer.echo(f"Final price: {format_currency(total) or ''}")

    typer.echo(f"\nProduct Summary Page: {create_link(selections, base_url)}")
