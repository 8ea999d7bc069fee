"""Number parsing and currency display helpers for the calculator form."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def parse_input_number(text: str) -> float:
    """Parse a grouped number typed into the form, e.g. ``"100,000"``.

    Blank input reads as 0, the way an emptied field does in the browser.
    Anything else that is not a number raises ``ValueError``.
    """
    cleaned = text.replace(",", "").strip()
    if not cleaned:
        return 0.0
    return float(cleaned)


def format_currency(value: float) -> str:
    """Whole-dollar en-US currency text: ``1234.5`` -> ``"$1,235"``.

    Negative amounts keep their sign even when they round to zero
    (``-0.2`` -> ``"-$0"``); infinities render as ``"$∞"`` and NaN as ``"$NaN"``.
    """
    if math.isnan(value):
        return "$NaN"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if math.isinf(value):
        return f"{sign}$∞"
    # halves round away from zero
    dollars = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{sign}${abs(dollars):,}"
