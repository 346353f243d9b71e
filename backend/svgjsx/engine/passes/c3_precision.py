"""C3 — Precision Optimization.

Round attribute values that are a single decimal literal carrying more
fractional digits than ``options.precision``. Integers, lists of numbers and
non-numeric values are left alone.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document


def fractional_digits(value: str) -> int | None:
    """Number of fractional digits of a plain decimal literal, or None.

    Accepts ``[+-]digits.digits`` only; no exponent, no units.
    """
    body = value[1:] if value[:1] in ("+", "-") else value
    whole, dot, fraction = body.partition(".")
    if not dot or not whole.isdigit() or not fraction.isdigit():
        return None
    if not (whole.isascii() and fraction.isascii()):
        return None
    return len(fraction)


def round_decimal(value: str, precision: int) -> str:
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return str(rounded)


@cleaning_pass(
    id="C3",
    order=3,
    option="optimize_precision",
    description="Optimized precision in {count} attributes",
)
def optimize_precision(document: Document, options: CleaningOptions) -> int:
    changed = 0
    for element in document.iter():
        for name, value in list(element.attributes.items()):
            digits = fractional_digits(value)
            if digits is None or digits <= options.precision:
                continue
            try:
                element.attributes[name] = round_decimal(value, options.precision)
            except InvalidOperation:
                continue
            changed += 1
    return changed
