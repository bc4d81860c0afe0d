"""Conversions between drops and XRP decimal strings."""

from decimal import Decimal, InvalidOperation
from typing import Union

DROPS_PER_XRP = Decimal(1_000_000)


def format_decimal(value: Decimal) -> str:
    """Render a decimal without exponent or trailing zeros."""

    if value == 0:
        return "0"
    return format(value.normalize(), "f")


def drops_to_xrp(drops: Union[str, int]) -> str:
    """Convert an integer drop amount into an XRP decimal string."""

    try:
        amount = Decimal(str(drops))
    except InvalidOperation as exc:
        raise ValueError(f"invalid drops amount: {drops!r}") from exc
    if amount != amount.to_integral_value():
        raise ValueError(f"drops amount must be an integer: {drops!r}")
    return format_decimal(amount / DROPS_PER_XRP)
