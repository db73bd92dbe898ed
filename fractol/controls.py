"""Keyboard and mouse handling: how user input changes a fractal's view."""

from enum import Enum, IntEnum, auto

from .fractals import FractalKind

C_STEP = 0.01
MOVE_STEP = 0.05
ZOOM_FACTOR = 1.1
ZOOM_SHIFT = 0.1
ITERATION_STEP = 10
CONVERGENT_ITERATION_FACTOR = 10


class Key(Enum):
    """Keys that the viewer reacts to."""

    ESC = auto()
    CBL = auto()
    CBR = auto()
    H = auto()
    N = auto()
    B = auto()
    W = auto()
    S = auto()
    D = auto()
    A = auto()
    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    I = auto()  # noqa: E741
    K = auto()
    L = auto()
    J = auto()
    MINUS = auto()
    PLUS = auto()
    NUM0 = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()
    ONE = auto()
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()


class MouseButton(IntEnum):
    """Pointer buttons, numbered as the X11 protocol numbers them."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5


class Action(Enum):
    """What the caller should do after an input event."""

    REDRAW = auto()
    IGNORE = auto()
    QUIT = auto()


_CONVERGENT = (FractalKind.NEWTON, FractalKind.NOVA)

_NUMPAD = {
    Key.NUM0: 0,
    Key.NUM1: 1,
    Key.NUM2: 2,
    Key.NUM3: 3,
    Key.NUM4: 4,
    Key.NUM5: 5,
    Key.NUM6: 6,
    Key.NUM7: 7,
    Key.NUM8: 8,
    Key.NUM9: 9,
}

_KIND_KEYS = {
    Key.ONE: FractalKind.JULIA,
    Key.TWO: FractalKind.MANDELBROT,
    Key.THREE: FractalKind.BURNING_SHIP,
    Key.FOUR: FractalKind.LEAF,
    Key.FIVE: FractalKind.LEAFT,
    Key.SIX: FractalKind.NEWTON,
    Key.SEVEN: FractalKind.NOVA,
}

_NUDGES = {
    Key.W: ("c", complex(0, C_STEP)),
    Key.S: ("c", complex(0, -C_STEP)),
    Key.D: ("c", complex(C_STEP, 0)),
    Key.A: ("c", complex(-C_STEP, 0)),
    Key.UP: ("move", complex(0, MOVE_STEP)),
    Key.DOWN: ("move", complex(0, -MOVE_STEP)),
    Key.RIGHT: ("move", complex(MOVE_STEP, 0)),
    Key.LEFT: ("move", complex(-MOVE_STEP, 0)),
    Key.I: ("q", complex(0, Q_STEP := C_STEP)),
    Key.K: ("q", complex(0, -Q_STEP)),
    Key.L: ("q", complex(Q_STEP, 0)),
    Key.J: ("q", complex(-Q_STEP, 0)),
}


def _change_iterations(fractal, key):
    convergent = fractal.kind in _CONVERGENT
    if key is Key.MINUS and convergent and fractal.imax >= CONVERGENT_ITERATION_FACTOR:
        fractal.imax //= CONVERGENT_ITERATION_FACTOR
    elif key is Key.PLUS and convergent:
        fractal.imax *= CONVERGENT_ITERATION_FACTOR
    elif key is Key.MINUS:
        # The count never drops below zero.
        fractal.imax = max(fractal.imax - ITERATION_STEP, 0)
    elif key is Key.PLUS:
        fractal.imax += ITERATION_STEP


def _nudge(fractal, key):
    attribute, step = _NUDGES[key]
    setattr(fractal, attribute, getattr(fractal, attribute) + step * fractal.zoom)


def handle_key(fractal, key):
    """Apply ``key`` to ``fractal`` and return what should happen next."""
    key = Key(key)
    if key is Key.ESC:
        return Action.QUIT
    if key is Key.CBL:
        fractal.power -= 1
    elif key is Key.CBR:
        fractal.power += 1
    elif key is Key.H:
        fractal.hstate += 1
    elif key is Key.N and fractal.kind in (FractalKind.NOVA, FractalKind.MANDELBROT):
        fractal.nstate += 1
    if key in _NUMPAD:
        fractal.selector = _NUMPAD[key]
    if key in (Key.MINUS, Key.PLUS):
        _change_iterations(fractal, key)
    if key in _NUDGES:
        _nudge(fractal, key)
    if key is Key.B:
        fractal.reset(fractal.kind)
    elif key in _KIND_KEYS:
        fractal.reset(_KIND_KEYS[key])
    return Action.REDRAW


def _pointer_offset(fractal, x, y):
    """Plane offset of pixel ``(x, y)`` from the view centre at unit zoom."""
    r = fractal.r
    return complex(
        (2 * r * x / fractal.width - r) * fractal.ratio,
        r - 2 * r * y / fractal.height,
    )


def handle_mouse(fractal, button, x, y):
    """Apply a click or scroll at pixel ``(x, y)``; zooming follows the pointer."""
    try:
        button = MouseButton(button)
    except ValueError:
        return Action.IGNORE
    if button is MouseButton.SCROLL_DOWN:
        fractal.zoom *= ZOOM_FACTOR
        fractal.move -= _pointer_offset(fractal, x, y) * ZOOM_SHIFT * fractal.zoom
    elif button is MouseButton.SCROLL_UP:
        fractal.zoom /= ZOOM_FACTOR
        fractal.move += _pointer_offset(fractal, x, y) * ZOOM_SHIFT * fractal.zoom
    elif button is MouseButton.LEFT:
        fractal.cstate += 1
    else:
        return Action.IGNORE
    return Action.REDRAW


def handle_motion(fractal, x, y):
    """While pointer tracking is on, set ``c`` from the pointer position."""
    if fractal.cstate % 2 != 1:
        return Action.IGNORE
    fractal.c = _pointer_offset(fractal, x, y) * fractal.zoom
    return Action.REDRAW