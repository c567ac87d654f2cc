"""Rounding helpers for nutrition values."""

import math
import sys
from decimal import ROUND_HALF_UP, Context, Decimal

_TENTHS = Decimal("0.1")
_UNITS = Decimal("1")
# Wide enough to quantize any finite float to tenths.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def clamp_finite(value: float) -> float:
    """Cap an overflowed value at the largest finite float."""
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(sys.float_info.max, value)
    return value


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    value = clamp_finite(value)
    quantized = Decimal(repr(value)).quantize(_TENTHS, context=_CONTEXT)
    return clamp_finite(float(quantized))


def round_whole(value: float) -> int:
    """Round to the nearest whole number, halves away from zero."""
    value = clamp_finite(value)
    return int(Decimal(repr(value)).quantize(_UNITS, context=_CONTEXT))
