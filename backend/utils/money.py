"""Money and percentage helpers: rate normalization, cent rounding, formatting."""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from config import CURRENCY_SYMBOL

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def parse_percent(value, field: str = "rate") -> Decimal:
    """
    Normalize a fee or discount percentage.

    Missing, non-numeric, non-finite, negative or above-100 values are
    replaced by 0 so one malformed global rate cannot corrupt every split.

    Args:
        value: Number or numeric string as supplied by the caller
        field: Name used in the log message

    Returns:
        Percentage in [0, 100] as a Decimal
    """
    if value is None:
        return ZERO
    if isinstance(value, bool):
        logger.warning(f"Invalid {field} {value!r}, using 0")
        return ZERO

    try:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return ZERO
        percent = Decimal(str(value))
    except (InvalidOperation, ValueError):
        logger.warning(f"Non-numeric {field} {value!r}, using 0")
        return ZERO

    if not percent.is_finite() or percent < ZERO or percent > HUNDRED:
        logger.warning(f"Out of range {field} {value!r}, using 0")
        return ZERO

    return percent


def percent_of(amount_cents: int, percent: Decimal) -> int:
    """Return percent% of an amount in cents, rounded half-up to a whole cent."""
    exact = Decimal(amount_cents) * percent / HUNDRED
    return int(exact.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(amount_cents: int, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Format an amount in cents as a currency string with symbol.

    Example: 1234 -> "$12.34", -50 -> "-$0.50"
    """
    amount = (Decimal(amount_cents) / HUNDRED).quantize(Decimal("0.01"))
    if amount < 0:
        return f"-{symbol}{abs(amount)}"
    return f"{symbol}{amount}"
