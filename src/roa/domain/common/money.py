from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Exact currency amount held as integer cents."""

    amount_cents: int

    def __post_init__(self) -> None:
        if self.amount_cents < 0:
            raise ValueError("amount_cents must be >= 0")

    @classmethod
    def parse(cls, raw: str) -> Money:
        try:
            value = Decimal(raw.strip())
        except (InvalidOperation, AttributeError) as exc:
            raise ValueError(f"amount is not a decimal number: {raw!r}") from exc
        if not value.is_finite():
            raise ValueError(f"amount is not a decimal number: {raw!r}")
        try:
            exact = value == value.quantize(_CENT)
        except InvalidOperation as exc:
            raise ValueError(f"amount is out of range: {raw!r}") from exc
        if not exact:
            raise ValueError("amount must have at most two decimal places")
        return cls(amount_cents=int(value * 100))

    def to_decimal(self) -> Decimal:
        return Decimal(self.amount_cents).scaleb(-2)

    def to_decimal_string(self) -> str:
        return f"{self.to_decimal():.2f}"


def format_total(amount_cents: int, count: int) -> str:
    if count == 0:
        return "0"
    return Money(amount_cents=amount_cents).to_decimal_string()


def format_average(amount_cents: int, count: int) -> str:
    if count == 0:
        return "0"
    average = (Decimal(amount_cents) / Decimal(count * 100)).quantize(
        _CENT, rounding=ROUND_HALF_UP
    )
    return _plain(average.normalize())


def cents_lower_bound(value: Decimal) -> int:
    """Smallest cent count that is >= value."""
    return int((value * 100).to_integral_value(rounding=ROUND_CEILING))


def cents_upper_bound(value: Decimal) -> int:
    """Largest cent count that is <= value."""
    return int((value * 100).to_integral_value(rounding=ROUND_FLOOR))


def _plain(value: Decimal) -> str:
    # normalize() turns 10 into 1E+1
    return format(value, "f")
