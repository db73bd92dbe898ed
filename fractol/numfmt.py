"""Number-to-text conversions used by the on-screen overlay."""

import math

_INT_BITS = 32


def _as_c_int(value):
    """Reduce ``value`` to a signed 32-bit integer, wrapping like a C ``int``."""
    span = 1 << _INT_BITS
    half = span >> 1
    return (value + half) % span - half


def format_fixed(value, precision):
    """Format ``value`` with ``precision + 1`` truncated decimal digits.

    The integer part is the truncated magnitude of ``value``, preceded by
    ``-`` for negative numbers. Decimal digits are produced one at a time by
    repeated multiplication by ten, so they are truncated rather than rounded.
    """
    if precision < 0:
        raise ValueError(f"precision must not be negative: {precision}")
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    negative = value < 0
    truncated = int(value)
    magnitude = -value if negative else value
    integer_part = str(int(magnitude))
    remainder = magnitude - float(truncated)
    digits = []
    for _ in range(precision + 1):
        remainder *= 10
        whole = int(remainder)
        digits.append(str(whole % 10))
        remainder -= float(whole)
    sign = "-" if negative else ""
    return f"{sign}{integer_part}.{''.join(digits)}"


def format_int(value):
    """Return the decimal text of ``value`` taken as a signed 32-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return str(_as_c_int(value))