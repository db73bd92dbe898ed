from fractol.fractals import Fractal, FractalKind
from fractol.hud import HUD_COLOR, HudLine, hud_lines
from fractol.numfmt import format_fixed, format_int


def shown(kind):
    f = Fractal(kind=kind, width=20, height=10)
    f.hstate = 1
    return f


def texts(lines):
    return [line.text for line in lines]


def test_hidden_hud_is_empty():
    f = Fractal(kind=FractalKind.JULIA, width=20, height=10)
    assert hud_lines(f) == []
    f.hstate = 2
    assert hud_lines(f) == []


def test_mandelbrot_overlay_has_no_constant():
    lines = hud_lines(shown(FractalKind.MANDELBROT))
    assert "c.x = " not in texts(lines)
    assert "c.y = " not in texts(lines)
    assert lines[0] == HudLine(10, 20, "Mandelbrot")


def test_burning_ship_label_and_no_constant():
    lines = hud_lines(shown(FractalKind.BURNING_SHIP))
    assert lines[0].text == "Burning Ship"
    assert "c.x = " not in texts(lines)


def test_julia_overlay_shows_constant():
    f = shown(FractalKind.JULIA)
    lines = hud_lines(f)
    assert HudLine(52, 50, format_fixed(f.c.real, 5)) in lines
    assert HudLine(52, 60, format_fixed(f.c.imag, 5)) in lines


def test_power_and_iterations_values():
    f = shown(FractalKind.NEWTON)
    f.power = -3
    lines = hud_lines(f)
    assert HudLine(52, 30, format_int(-3)) in lines
    assert HudLine(101, 40, format_int(f.imax)) in lines
    assert lines[0].text == "Newton"


def test_zoom_is_last_line():
    f = shown(FractalKind.LEAF)
    f.zoom = 0.25
    lines = hud_lines(f)
    assert lines[-2] == HudLine(10, 70, "zoom = ")
    assert lines[-1] == HudLine(59, 70, format_fixed(0.25, 2))


def test_all_lines_white_and_labels_left_aligned():
    lines = hud_lines(shown(FractalKind.NOVA))
    assert all(line.color == HUD_COLOR for line in lines)
    labels = [line for line in lines if line.text.endswith(" ")]
    assert {line.x for line in labels} == {10}
    assert len(lines) == 11