from PIL import Image

from fractol.canvas import DoubleBuffer
from fractol.cli import main
from fractol.controls import Key, handle_key
from fractol.fractals import Fractal, FractalKind


def test_missing_name_is_an_error(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_unknown_name_is_an_error(capsys, tmp_path):
    out = tmp_path / "x.png"
    assert main(["julia", "-o", str(out)]) == 1
    assert "Julia" in capsys.readouterr().err
    assert not out.exists()


def test_unknown_key_is_an_error(tmp_path):
    out = tmp_path / "x.png"
    assert main(["Julia", "-o", str(out), "--width", "8", "--height", "6", "-k", "Q"]) == 1
    assert not out.exists()


def test_invalid_size_is_an_error(tmp_path):
    out = tmp_path / "x.png"
    assert main(["Julia", "-o", str(out), "--width", "0"]) == 1
    assert not out.exists()


def test_escape_key_exits_without_writing(tmp_path):
    out = tmp_path / "x.png"
    assert main(["Mandelbrot", "-o", str(out), "--width", "8", "--height", "6", "-k", "esc"]) == 0
    assert not out.exists()


def test_render_matches_direct_rendering(tmp_path):
    out = tmp_path / "julia.png"
    assert main(["Julia", "-o", str(out), "--width", "8", "--height", "6"]) == 0
    image = Image.open(out).convert("RGB")
    assert image.size == (8, 6)

    fractal = Fractal(kind=FractalKind.JULIA, width=8, height=6)
    buffer = DoubleBuffer(8, 6)
    fractal.render(buffer)
    for x in range(8):
        for y in range(6):
            color = buffer.front.get_pixel(x, y)
            expected = ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
            assert image.getpixel((x, y)) == expected


def test_keys_are_applied_before_rendering(tmp_path):
    out = tmp_path / "mandel.png"
    args = ["Mandelbrot", "-o", str(out), "--width", "6", "--height", "4", "-k", "NUM3", "-k", "UP"]
    assert main(args) == 0
    image = Image.open(out).convert("RGB")

    fractal = Fractal(kind=FractalKind.MANDELBROT, width=6, height=4)
    handle_key(fractal, Key.NUM3)
    handle_key(fractal, Key.UP)
    buffer = DoubleBuffer(6, 4)
    fractal.render(buffer)
    color = buffer.front.get_pixel(2, 1)
    assert image.getpixel((2, 1)) == ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)