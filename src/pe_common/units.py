"""Fixed-point arithmetic utilities for the payments ledger.

All balances and amounts inside the ledger are int "units" of 1/10000 of a
currency unit. Decimal only appears at the input/output boundary.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

SCALE_DIGITS: int = 4
UNITS_PER_WHOLE: int = 10**SCALE_DIGITS

_QUANTUM = Decimal(1).scaleb(-SCALE_DIGITS)  # Decimal("0.0001")


def to_units(amount: Decimal) -> int:
    """Convert a decimal amount to units, rounding half-up at 4 places.

    Decimal("1.5") -> 15000, Decimal("0.00005") -> 1.
    """
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {amount}")
    try:
        quantized = amount.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {amount}") from exc
    return int(quantized.scaleb(SCALE_DIGITS))


def units_to_display(units: int) -> str:
    """Render units with exactly 4 fractional digits: 15000 -> '1.5000'."""
    sign = "-" if units < 0 else ""
    whole, frac = divmod(abs(units), UNITS_PER_WHOLE)
    return f"{sign}{whole}.{frac:0{SCALE_DIGITS}d}"
