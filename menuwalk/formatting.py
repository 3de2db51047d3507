"""Currency formatting helpers."""

import math


def format_currency(value: int | float | str | None) -> str | None:
    """Format a numerical price as USD, e.g. ``1234.5`` -> ``$1,234.50``.

    Numeric strings are accepted. Anything else returns None.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None

    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(number):
        return None

    # Adding 0.0 folds -0.0 into 0.0
    amount = round(number, 2) + 0.0
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
