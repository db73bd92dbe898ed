"""Command line: render a fractal, optionally after a sequence of key presses."""

import argparse
import sys

from PIL import ImageDraw

from .canvas import DoubleBuffer
from .controls import Action, Key, handle_key
from .fractals import DEFAULT_HEIGHT, DEFAULT_WIDTH, Fractal, FractalKind, parse_kind
from .hud import hud_lines

_NAMES = ", ".join(kind.value for kind in FractalKind)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="fractol", description="Render a fractal to an image file."
    )
    parser.add_argument("name", nargs="?", help=f"one of: {_NAMES}")
    parser.add_argument("-o", "--output", default="fractol.png", help="image file to write")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "-k",
        "--key",
        action="append",
        default=[],
        help="key to press before rendering (e.g. PLUS, UP, NUM3, H); repeatable",
    )
    return parser


def _usage_error(message):
    print(f"fractol: {message}", file=sys.stderr)
    print(f"usage: fractol <name> [options]; names: {_NAMES}", file=sys.stderr)
    return 1


def _rgb(color):
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def main(argv=None):
    """Run the command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    if args.name is None:
        return _usage_error("no fractal given")
    try:
        kind = parse_kind(args.name)
        keys = [Key[name.upper()] for name in args.key]
    except ValueError as error:
        return _usage_error(str(error))
    except KeyError as error:
        return _usage_error(f"unknown key: {error.args[0]}")
    try:
        fractal = Fractal(kind=kind, width=args.width, height=args.height)
    except ValueError as error:
        return _usage_error(str(error))

    for key in keys:
        if handle_key(fractal, key) is Action.QUIT:
            return 0

    buffer = DoubleBuffer(fractal.width, fractal.height)
    fractal.render(buffer)
    image = buffer.front.to_image()
    lines = hud_lines(fractal)
    if lines:
        draw = ImageDraw.Draw(image)
        for line in lines:
            draw.text((line.x, line.y), line.text, fill=_rgb(line.color))
    try:
        image.save(args.output)
    except (OSError, ValueError) as error:
        print(f"fractol: cannot write {args.output}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())