"""Text overlay describing the current view."""

from dataclasses import dataclass

from .fractals import FractalKind
from .numfmt import format_fixed, format_int

HUD_COLOR = 0x00FFFFFF

_NO_CONSTANT = (FractalKind.MANDELBROT, FractalKind.BURNING_SHIP)


@dataclass(frozen=True)
class HudLine:
    """A piece of overlay text drawn at pixel ``(x, y)``."""

    x: int
    y: int
    text: str
    color: int = HUD_COLOR


def hud_lines(fractal):
    """Return the overlay for ``fractal``; empty while the overlay is hidden."""
    if fractal.hstate % 2 != 1:
        return []
    lines = [
        HudLine(10, 20, fractal.kind.label),
        HudLine(10, 30, "Pow : "),
        HudLine(52, 30, format_int(fractal.power)),
        HudLine(10, 40, "Iterations : "),
        HudLine(101, 40, format_int(fractal.imax)),
    ]
    if fractal.kind not in _NO_CONSTANT:
        lines += [
            HudLine(10, 50, "c.x = "),
            HudLine(52, 50, format_fixed(fractal.c.real, 5)),
            HudLine(10, 60, "c.y = "),
            HudLine(52, 60, format_fixed(fractal.c.imag, 5)),
        ]
    lines += [
        HudLine(10, 70, "zoom = "),
        HudLine(59, 70, format_fixed(fractal.zoom, 2)),
    ]
    return lines