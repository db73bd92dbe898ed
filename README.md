# fractol

Renders fractals on the complex plane to image files:

- **Julia**: the Julia set of `z² + c`, starting at `c = -0.816 + 0.1999i`
- **Mandelbrot**: the Mandelbrot set. An alternative mode adds `c / |c|²`
  in place of `c`.
- **Burning_Ship**: the Burning Ship fractal
- **Leaf** and **Leaft**: iterate `cos(z / c)` and `sin(z / c)`
- **Newton**: Newton's-method basins of a cubic
- **Nova**: a relaxed Newton iteration with a `c` offset

Escaping points get a smooth logarithmic gradient that starts from one of ten
palette colours. Points that never escape are drawn white, except in Nova,
where they are black. Newton points are coloured by the basin they settle in.

## Installation

```
pip install .
```

Pillow is the only runtime dependency.

## Command line

```
fractol Mandelbrot
fractol Julia -o julia.png
fractol Nova --width 400 --height 300
fractol Mandelbrot -k PLUS -k PLUS -k NUM3 -k H
```

- `name`: one of `Julia`, `Mandelbrot`, `Burning_Ship`, `Leaf`, `Leaft`,
  `Newton`, `Nova`. Names are case-sensitive.
- `-o`, `--output`: the image file to write. The default is `fractol.png`.
  The file extension chooses the format.
- `--width`, `--height`: the image size in pixels. The default is 800×600.
- `-k`, `--key`: a key press to apply before rendering. You can repeat it.
  Key names follow `fractol.controls.Key` and are case-insensitive.

The main keys:

- `UP`, `DOWN`, `LEFT`, `RIGHT`: pan the view.
- `W`, `A`, `S`, `D`: move `c`.
- `I`, `J`, `K`, `L`: move Nova's `q`.
- `PLUS`, `MINUS`: change the iteration count. For Newton and Nova they
  multiply or divide it by ten; for the others they add or subtract ten.
- `CBL`, `CBR`: lower or raise the power.
- `NUM0` to `NUM9`: select the palette colour.
- `N`: toggle the alternative Mandelbrot or Nova mode.
- `H`: toggle the text overlay drawn onto the image.
- `B`: reset the current fractal.
- `ONE` to `SEVEN`: switch fractal.
- `ESC`: stop without writing anything.

The command exits with status 1 in these cases:

- the name is missing or unknown
- a key name is unknown
- the size is invalid
- the output cannot be written

## Library

- `fractol.fractals`:
  - `FractalKind` and `parse_kind`, which turns a name into a kind.
  - `Fractal`, the view state. It has `reset`, `pixel_to_plane`,
    `iterations_at`, `color_at` and `render`. `render` draws into a
    `DoubleBuffer` and then swaps it.
- `fractol.canvas`: `Canvas` holds 32-bit `0xAARRGGBB` pixels. It has
  `put_pixel`, `get_pixel`, `to_image` and `save`. `DoubleBuffer` holds a
  `back` and a `front` canvas and has `swap`.
- `fractol.controls`: `handle_key`, `handle_mouse` and `handle_motion`
  update a `Fractal` and return an `Action` (`REDRAW`, `IGNORE` or `QUIT`).
  Input is described with `Key` and `MouseButton`. The scroll buttons zoom
  towards the pointer, and a left click toggles whether pointer motion
  sets `c`.
- `fractol.hud`: `hud_lines` returns the overlay as `HudLine` items. The
  overlay shows the name, power, iterations, `c` (except for Mandelbrot and
  Burning Ship) and zoom.
- `fractol.colors`: `smooth_color`, `palette_color` and `newton_color`.
- `fractol.complexmath`: `squared_modulus`, `int_pow`, `complex_div`,
  `complex_power` (powers 1 to 10), `cos_of_quotient` and `sin_of_quotient`.
- `fractol.numfmt`: `format_fixed` (truncated decimal text) and `format_int`
  (32-bit integer text).
- `fractol.strutil`: `atoi`, `atoi_safe`, `atoll`, `split`, `strtrim` and
  `substr`.

## What it does not do

There is no interactive window. The command renders a single image to a file.
Key presses can only be given in advance with `--key`. Mouse handling exists
in `fractol.controls`, but the command line does not use it.

## Running the tests

```
pip install ".[test]"
pytest
```