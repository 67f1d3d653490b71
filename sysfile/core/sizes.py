"""
sysfile.core.sizes

Human-readable byte counts using binary (1024-based) prefixes.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Tuple

SIZE_UNITS: Tuple[str, ...] = (" bytes", "K", "M", "G", "T", "P", "E", "Z", "Y")
SIZE_STEP = 1024


def _scaling_context(size: Decimal, precision: int) -> Context:
    # each division by 1024 adds at most ten digits; keep them all
    digits = max(size.adjusted() + 1, 1) + 10 * (len(SIZE_UNITS) - 1)
    return Context(prec=max(28, digits + max(precision, 0) + 2))


def _format_number(number: Decimal) -> str:
    # 1.50 -> "1.5", 1.0 -> "1", 1.2E+3 -> "1200"
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def human_size(size: int, precision: int = 1) -> str:
    """
    Convert a byte count into a short string such as ``4.35M``.

    The value moves to the next unit while ``value + 1 > 1024``, so an exact
    power of 1024 is reported in the larger unit (``1024`` -> ``1K``). Sizes
    past the yotta range keep the ``Y`` suffix with a large numeric prefix.

    Args:
        size: Non-negative number of bytes.
        precision: Decimal digits kept after rounding half-up.

    Raises:
        ValueError: If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}")

    value = Decimal(size)
    context = _scaling_context(value, precision)
    index = 0
    while context.add(value, 1) > SIZE_STEP and index < len(SIZE_UNITS) - 1:
        value = context.divide(value, SIZE_STEP)
        index += 1

    quantum = Decimal(1).scaleb(-precision)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    return f"{_format_number(rounded)}{SIZE_UNITS[index]}"


__all__ = ["SIZE_UNITS", "SIZE_STEP", "human_size"]
