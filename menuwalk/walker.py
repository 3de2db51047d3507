"""Interactive menu walk over a catalog hierarchy."""

import enum
import logging
from dataclasses import dataclass

import typer

from .formatting import format_currency
from .model import Catalog, CatalogNode
from .protocol import LineReader

logger = logging.getLogger(__name__)

QUIT_SIGNAL = "q"
PROMPT = "Make a selection (q to quit)"


class SelectionKind(enum.Enum):
    INDEX = "index"
    QUIT = "quit"
    INVALID = "invalid"


@dataclass(frozen=True)
class Selection:
    kind: SelectionKind
    index: int | None = None


class TyperLineReader:
    """Reads one line from the terminal per prompt."""

    def read_line(self, prompt: str) -> str | None:
        try:
            return typer.prompt(prompt, default="", show_default=False)
        except typer.Abort:
            # EOF or Ctrl-C
            return None


def parse_selection(raw: str | None, tier_size: int) -> Selection:
    """Classify one line of operator input against a tier of tier_size items."""
    text = (raw or "").strip()
    if not text or text.lower() == QUIT_SIGNAL:
        return Selection(SelectionKind.QUIT)

    # Python-only numeric forms such as 1_0 are not selections
    if "_" in text:
        return Selection(SelectionKind.INVALID)

    try:
        number = float(text)
    except ValueError:
        return Selection(SelectionKind.INVALID)

    if not number.is_integer() or not 1 <= number <= tier_size:
        return Selection(SelectionKind.INVALID)

    return Selection(SelectionKind.INDEX, int(number))


def display_tier(tier: list[CatalogNode]) -> None:
    """Print all menu items at this level."""
    for position, item in enumerate(tier, start=1):
        typer.echo(f"{position}. {item.name} - {format_currency(item.price) or ''}")


def run_menu(catalog: Catalog, reader: LineReader | None = None) -> list[CatalogNode]:
    """Walk the catalog tier by tier, returning the selected nodes in order.

    The walk ends when the operator quits (empty input or ``q``) or when a
    selected node has no children.
    """
    if reader is None:
        reader = TyperLineReader()

    if not catalog.menu:
        typer.echo("No menu items to display")
        return []

    selections: list[CatalogNode] = []

    typer.echo("Menu")
    typer.echo("----")

    tier = catalog.menu
    while tier:
        display_tier(tier)
        raw = reader.read_line(PROMPT)
        selection = parse_selection(raw, len(tier))

        if selection.kind is SelectionKind.QUIT:
            logger.debug(f"Operator quit after {len(selections)} selections")
            return selections

        if selection.kind is SelectionKind.INVALID:
            logger.debug(f"Rejected selection {raw!r} for tier of {len(tier)}")
            typer.echo(
                f"Invalid selection '{(raw or '').strip()}'. "
                f"Enter a number from 1 to {len(tier)}, or {QUIT_SIGNAL} to quit."
            )
            continue

        selected = tier[selection.index - 1]
        typer.echo(
            f"\nYou selected {selected.name} for {format_currency(selected.price) or ''}\n"
        )
        selections.append(selected)

        if selected.is_leaf:
            break
        tier = selected.children

    logger.debug(f"Reached a leaf after {len(selections)} selections")
    return selections
