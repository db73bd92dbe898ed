"""The seven fractal families, their parameters and their per-pixel iteration."""

import math
from dataclasses import dataclass, field
from enum import Enum

from .colors import newton_color, palette_color
from .complexmath import (
    complex_power,
    cos_of_quotient,
    int_pow,
    sin_of_quotient,
    squared_modulus,
)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

ESCAPE_LIMIT = 4.0
INSIDE_COLOR = 0x00FFFFFF
NOVA_INSIDE_COLOR = 0x00000000

JULIA_CONSTANT = complex(-0.816, 0.1999)
DEFAULT_TOLERANCE = 0.001


class FractalKind(Enum):
    """The available fractals, valued by the name used to select them."""

    JULIA = "Julia"
    MANDELBROT = "Mandelbrot"
    BURNING_SHIP = "Burning_Ship"
    LEAF = "Leaf"
    LEAFT = "Leaft"
    NEWTON = "Newton"
    NOVA = "Nova"

    @property
    def label(self):
        """Human-readable name."""
        return self.value.replace("_", " ")


_CONVERGENT = (FractalKind.NEWTON, FractalKind.NOVA)


def parse_kind(name):
    """Return the fractal kind selected by ``name`` (exact, case-sensitive)."""
    try:
        return FractalKind(name)
    except ValueError:
        raise ValueError(f"unknown fractal: {name!r}") from None


def _div(numerator, denominator):
    """Divide with IEEE results instead of raising on a zero divisor."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class Fractal:
    """View parameters and state of one fractal on a ``width`` x ``height`` grid."""

    kind: FractalKind = FractalKind.MANDELBROT
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    z: complex = 0j
    c: complex = 0j
    q: complex = 1 + 0j
    a: float = 1.0
    d: float = -1.0
    r: float = 2.0
    tol: float = DEFAULT_TOLERANCE
    imax: int = 100
    zoom: float = 1.0
    move: complex = 0j
    power: int = 2
    selector: int = 0
    nstate: int = 0
    cstate: int = 0
    hstate: int = field(default=0)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid size {self.width}x{self.height}")
        self.reset(self.kind)

    @property
    def ratio(self):
        """Width-to-height ratio applied to the real axis."""
        return self.width / self.height

    def reset(self, kind):
        """Switch to ``kind`` and restore its initial view and parameters."""
        kind = FractalKind(kind)
        self.kind = kind
        self.z = 0j
        self.zoom = 1.0
        self.move = 0j
        self.r = 2.0
        self.imax = 100
        self.power = 2
        if kind is FractalKind.JULIA:
            self.c = JULIA_CONSTANT
        elif kind is FractalKind.MANDELBROT:
            self.nstate = 0
        elif kind is FractalKind.NEWTON:
            self.imax = 50
            self.power = 0
            self.tol = DEFAULT_TOLERANCE
            return
        elif kind is FractalKind.NOVA:
            self.nstate = 0
            self.c = 0j
            self.q = 1 + 0j
            self.a = 1.0
            self.d = -1.0
            self.r = 1.5
            self.tol = DEFAULT_TOLERANCE
            self.power = 0
        self.selector = 0

    def pixel_to_plane(self, px, py):
        """Return the complex-plane point shown at pixel ``(px, py)``."""
        real = (2 * self.r * px / self.width - self.r) * self.zoom * self.ratio
        imag = (self.r - 2 * self.r * py / self.height) * self.zoom
        return complex(real + self.move.real, imag + self.move.imag)

    def _start(self, px, py):
        point = self.pixel_to_plane(px, py)
        kind = self.kind
        if kind is FractalKind.JULIA:
            return point, self.c
        if kind is FractalKind.MANDELBROT:
            return 0j, point
        if kind is FractalKind.NOVA:
            if self.nstate % 2 == 0:
                return point, 0j
            return 1 + 0j, point
        return point, point

    def _escape_step(self, z, c):
        kind = self.kind
        if kind is FractalKind.JULIA:
            return complex_power(z, self.power) + c
        if kind is FractalKind.MANDELBROT:
            zp = complex_power(z, self.power)
            if self.nstate % 2 == 0:
                return zp + c
            norm = int_pow(c.real, 2) + int_pow(c.imag, 2)
            return complex(zp.real + _div(c.real, norm), zp.imag + _div(c.imag, norm))
        if kind is FractalKind.BURNING_SHIP:
            zp = complex_power(z, self.power)
            return complex(zp.real + c.real, abs(zp.imag) - c.imag)
        if kind is FractalKind.LEAF:
            return cos_of_quotient(z, c)
        return sin_of_quotient(z, c)

    @staticmethod
    def _newton_step(z):
        x, y = z.real, z.imag
        denom = 3 * int_pow(int_pow(x, 2) + int_pow(y, 2), 2)
        nx = _div(
            2 * int_pow(x, 5)
            + 4 * int_pow(x, 3) * int_pow(y, 2)
            - int_pow(x, 2)
            + 2 * x * int_pow(y, 4)
            + int_pow(y, 2),
            denom,
        )
        ny = _div(
            2 * y * (int_pow(x, 4) + 2 * int_pow(x, 2) * int_pow(y, 2) + x + int_pow(y, 4)),
            denom,
        )
        return complex(nx, ny)

    def _nova_step(self, z, c):
        x, y = z.real, z.imag
        a, d, q = self.a, self.d, self.q
        denom = 3 * a * int_pow(int_pow(x, 2) + int_pow(y, 2), 2)
        tx = _div(
            a * (int_pow(a, 2) * int_pow(x, 5) - int_pow(a, 2) * int_pow(x, 3) * int_pow(y, 2))
            + 3 * a * (
                -int_pow(x, 3) * int_pow(y, 2)
                + x * int_pow(y, 4)
                + 2 * a * int_pow(x, 3) * int_pow(y, 2)
            )
            + d * int_pow(x, 2)
            - d * int_pow(y, 2)
            - 2 * x * int_pow(y, 4),
            denom,
        )
        ty = _div(
            -2 * int_pow(a, 3) * int_pow(x, 4) * y
            + 3 * a * (
                2 * int_pow(x, 2) * int_pow(y, 3)
                + a * int_pow(x, 4) * y
                - a * int_pow(x, 2) * int_pow(y, 3)
            )
            - 2 * d * x * y
            - int_pow(x, 2) * int_pow(y, 3)
            + int_pow(y, 5),
            denom,
        )
        return complex(
            x - q.real * tx - q.imag * ty + c.real,
            y - q.real * ty + q.imag * tx + c.imag,
        )

    def _orbit(self, px, py):
        """Iterate from pixel ``(px, py)``; return ``(count, final z, c)``."""
        z, c = self._start(px, py)
        i = 1
        if self.kind in _CONVERGENT:
            delta = 1.0
            while delta > self.tol and i < self.imax:
                i += 1
                old = z
                if self.kind is FractalKind.NEWTON:
                    z = self._newton_step(z)
                else:
                    z = self._nova_step(z, c)
                delta = int_pow(z.real - old.real, 2) + int_pow(z.imag - old.imag, 2)
        else:
            while squared_modulus(z) < ESCAPE_LIMIT and i < self.imax:
                i += 1
                z = self._escape_step(z, c)
        return i, z, c

    def iterations_at(self, px, py):
        """Return the iteration count reached at pixel ``(px, py)``."""
        return self._orbit(px, py)[0]

    def _color_of(self, i, z):
        if self.kind is FractalKind.NEWTON:
            return newton_color(i, self.imax, z, self.tol)
        if i == self.imax:
            return NOVA_INSIDE_COLOR if self.kind is FractalKind.NOVA else INSIDE_COLOR
        return palette_color(i, self.imax, self.selector)

    def color_at(self, px, py):
        """Return the 0xAARRGGBB colour of pixel ``(px, py)``."""
        i, z, _ = self._orbit(px, py)
        return self._color_of(i, z)

    def render(self, buffer):
        """Draw every pixel into ``buffer.back``, then swap the buffers."""
        if buffer.width != self.width or buffer.height != self.height:
            raise ValueError(
                f"buffer is {buffer.width}x{buffer.height}, "
                f"fractal is {self.width}x{self.height}"
            )
        canvas = buffer.back
        last_c = self.c
        for px in range(self.width):
            for py in range(self.height):
                i, z, last_c = self._orbit(px, py)
                canvas.put_pixel(px, py, self._color_of(i, z))
        if self.kind is not FractalKind.JULIA:
            self.c = last_c
        buffer.swap()