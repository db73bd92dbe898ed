"""Floating-point helpers for the fractal iterations.

The functions follow IEEE semantics: division by zero and overflow give
``inf``/``nan`` rather than raising, so escape tests simply stop on them.
"""

import math

MAX_INT_POWER = 12
MAX_COMPLEX_POWER = 10


def squared_modulus(z):
    """Return ``|z|**2`` for a complex number."""
    return z.real * z.real + z.imag * z.imag


def int_pow(x, power):
    """Return ``x`` multiplied by itself ``power`` times.

    Only powers 1 to 12 are computed; any other power yields 1.0.
    """
    if not 1 <= power <= MAX_INT_POWER:
        return 1.0
    result = x
    for _ in range(power - 1):
        result *= x
    return result


def _divide(numerator, denominator):
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _cos(x):
    return math.cos(x) if math.isfinite(x) else math.nan


def _sin(x):
    return math.sin(x) if math.isfinite(x) else math.nan


def _cosh(x):
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def _sinh(x):
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def complex_div(top, bottom):
    """Return ``top / bottom``; a zero divisor gives a ``nan`` result."""
    denominator = int_pow(bottom.real, 2) + int_pow(bottom.imag, 2)
    real = _divide(top.real * bottom.real, denominator) + _divide(
        top.imag * bottom.imag, denominator
    )
    imag = _divide(bottom.real * top.imag, denominator) - _divide(
        top.real * bottom.imag, denominator
    )
    return complex(real, imag)


def _binomial_part(x, y, power, parity):
    total = None
    for k in range(parity, power + 1, 2):
        sign = -1 if (k // 2) % 2 else 1
        term = sign * math.comb(power, k) * int_pow(x, power - k) * int_pow(y, k)
        total = term if total is None else total + term
    return total


def complex_power(z, power):
    """Return ``z**power`` expanded binomially for powers 1 to 10.

    Any other power yields ``0j``.
    """
    if not 1 <= power <= MAX_COMPLEX_POWER:
        return 0j
    x, y = z.real, z.imag
    return complex(_binomial_part(x, y, power, 0), _binomial_part(x, y, power, 1))


def cos_of_quotient(top, bottom):
    """Return ``cos(top / bottom)``."""
    q = complex_div(top, bottom)
    return complex(
        _cos(q.real) * _cosh(q.imag),
        -_sin(q.real) * _sinh(q.imag),
    )


def sin_of_quotient(top, bottom):
    """Return ``sin(top / bottom)``."""
    q = complex_div(top, bottom)
    return complex(
        _sin(q.real) * _cosh(q.imag),
        _cos(q.real) * _sinh(q.imag),
    )