"""Helpers for normalizing monetary amounts."""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from src.models.exceptions import InvalidAmountError

CENTS = Decimal("0.01")


def as_money(value) -> Decimal:
    """
    Normalize a value to a Decimal with two fractional digits.

    Floats go through str() first so that 0.1 becomes 0.10, not
    0.1000000000000000055511151231257827.

    Args:
        value: A Decimal, int, float or numeric string

    Returns:
        The amount quantized to cents with banker's rounding

    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a valid amount: {value!r}")
    try:
        amount = Decimal(str(value).strip().replace(",", ""))
        if not amount.is_finite():
            raise InvalidAmountError(f"Not a valid amount: {value!r}")
        return amount.quantize(CENTS, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise InvalidAmountError(f"Not a valid amount: {value!r}") from None


def format_money(amount: Decimal, symbol: str = "") -> str:
    """Render an amount as e.g. '£5,000.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
