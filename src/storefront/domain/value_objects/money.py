"""Money helpers for cedi amounts shown to customers and sent to the gateway."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

CEDI = "₵"

_AMOUNT_NOISE = re.compile(r"[₵$,\s]")
_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)")
_LEADING_DOLLAR = re.compile(r"^\$\s?")


def _leading_decimal(text: str) -> Optional[Decimal]:
    """Parse the numeric prefix of ``text`` ("12.5abc" -> 12.5)."""
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def to_minor_units(value: Any) -> int:
    """
    Convert a display amount to minor units (pesewas).

    Currency symbols, thousands separators and whitespace are ignored, so
    "₵1,250.50", "$12" and 12.5 are all accepted.

    Args:
        value: Amount as typed by the customer or computed by the cart

    Returns:
        Amount in minor units, 0 when the value cannot be parsed
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float, Decimal)):
        amount = Decimal(str(value))
    else:
        amount = _leading_decimal(_AMOUNT_NOISE.sub("", str(value)))
        if amount is None:
            return 0
    if not amount.is_finite():
        return 0
    try:
        return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0


def from_minor_units(value: Any) -> str:
    """Render a gateway amount in minor units as a two decimal string."""
    try:
        amount = Decimal(str(value or 0))
    except InvalidOperation:
        amount = Decimal(0)
    return f"{amount / 100:.2f}"


def format_cedi(value: Any) -> str:
    """
    Format an amount for notifications with the cedi symbol.

    Values already carrying the symbol are kept, a leading dollar sign is
    swapped for the cedi sign and bare numbers are rendered with two
    decimals. Anything else is returned as given.
    """
    if value is None:
        return ""
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return f"{CEDI}{Decimal(str(value)):.2f}"

    text = str(value).strip()
    if text.startswith(CEDI):
        return text
    if text.startswith("$"):
        return _LEADING_DOLLAR.sub(CEDI, text, count=1)
    if text[:1].isdigit():
        amount = _leading_decimal(_NON_NUMERIC.sub("", text)) or Decimal(0)
        return f"{CEDI}{amount:.2f}"
    return text


def display_value(value: Any) -> str:
    """Coerce a submitted amount to the string stored on the record."""
    if value is None:
        return ""
    return str(value).strip()
