"""Pixel colouring for escape-time and root-finding fractals."""

import math

COLOR_MASK = 0xFFFFFFFF

PALETTE = (
    0x0000042B,
    0x00786B84,
    0x00A2DCC7,
    0x004B9A76,
    0x00CA1B4C,
    0x004E5F65,
    0x008C595A,
    0x00888DA7,
    0x0067597A,
    0x000276A6,
)

NEWTON_DIVERGED = 0x00FF0000
NEWTON_LEFT_ROOT = 0x00FAE6CD
NEWTON_UPPER_ROOT = 0x00F3C0CE
NEWTON_LOWER_ROOT = 0x00979BC7
NEWTON_CENTER = 0x00A2DCC7

_SHIFTS = (24, 16, 8, 0)


def _log(value):
    return math.log(value) if value > 0 else -math.inf


def smooth_color(i, i_max, color):
    """Blend each ARGB channel of ``color`` towards 255 as ``log(i)/log(i_max)``."""
    if i < 1:
        raise ValueError("iteration count must be at least 1")
    if i_max == 1:
        raise ValueError("maximum iteration count must not be 1")
    t = _log(i) / _log(i_max)
    result = 0
    for shift in _SHIFTS:
        channel = (color >> shift) & 0xFF
        result |= int(channel + (255 - channel) * t) << shift
    return result & COLOR_MASK


def palette_color(i, i_max, selector):
    """Return the smoothed colour of palette entry ``selector``."""
    if not 0 <= selector < len(PALETTE):
        raise ValueError(f"palette selector out of range: {selector}")
    return smooth_color(i, i_max, PALETTE[selector])


def newton_color(i, i_max, z, tol):
    """Return the colour of a point that ended at ``z`` after ``i`` iterations."""
    if i == i_max:
        color = NEWTON_DIVERGED
    elif z.real <= -tol:
        color = NEWTON_LEFT_ROOT + (i << 8)
    elif z.real >= tol and z.imag > 0:
        color = NEWTON_UPPER_ROOT + (i << 8)
    elif z.real >= tol and z.imag < 0:
        color = NEWTON_LOWER_ROOT + (i << 8)
    else:
        color = NEWTON_CENTER * i // 1000000
    return color & COLOR_MASK