"""Catalog loading from a JSON pricing model file."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .model import Catalog

logger = logging.getLogger(__name__)


class ModelLoadError(Exception):
    """Raised when the pricing model cannot be read or parsed."""


def load_model(path: str | Path) -> Catalog:
    """Load the pricing model from file.

    Missing or unreadable files, malformed JSON and documents whose nodes
    do not match the catalog shape all raise ModelLoadError. A document
    without a ``menu`` key loads as an empty catalog.
    """
    logger.debug(f"Loading pricing model from {path}")

    try:
        data = Path(path).read_text(encoding="utf-8")
        parsed = json.loads(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ModelLoadError(f"Error loading JSON model: {e}") from e

    if not isinstance(parsed, dict):
        raise ModelLoadError(
            f"Error loading JSON model: expected an object, got {type(parsed).__name__}"
        )

    try:
        catalog = Catalog.model_validate(parsed)
    except ValidationError as e:
        raise ModelLoadError(f"Error loading JSON model: {e}") from e

    logger.info(f"Loaded {len(catalog.menu)} top-level menu items from {path}")
    return catalog
