from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from .errors import InvalidAmount

Cents = int

CENT = Decimal("0.01")


def to_cents(value: Union[str, int, float, Decimal]) -> Cents:
    """Convert a decimal currency amount to integer cents (half-up).

    Floats go through ``str`` first so ``14.5`` means 14.50, not its binary
    approximation.
    """
    if isinstance(value, bool):
        raise InvalidAmount(value)
    if isinstance(value, float):
        value = str(value)
    try:
        d = Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmount(value) from None
    if not d.is_finite():
        raise InvalidAmount(value)
    if d < 0:
        raise InvalidAmount(value, "valor negativo")
    return int((d * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_amount(text: str) -> Cents:
    text = text.strip()
    if not text:
        raise InvalidAmount(text, "valor vazio")
    return to_cents(text)


def format_cents(cents: Cents) -> str:
    """Render cents as ``123.45``."""
    amount = (Decimal(cents) / 100).quantize(CENT)
    return f"{amount:.2f}"
