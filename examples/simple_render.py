"""Render a piecewise linear curve and a tent over a checkerboard and save it as PNG.

Run directly with:
    python examples/simple_render.py [output.png]
"""
import sys

from PIL import Image

from tfeditor import Checkers, Editor, PiecewiseLinear, Tent


def build_editor() -> Editor:
    editor = Editor()
    editor.set_background(Checkers(16, (0.0, 0.0, 0.0), (1.0, 1.0, 1.0)))
    editor.add_function(PiecewiseLinear([(0.0, 1.0), (0.3, 0.8), (1.0, 1.0)]))
    editor.add_function(Tent())
    return editor


def main(path: str = "simple.png") -> None:
    tex = build_editor().rasterize(256, 128)
    # to_rgba() is in buffer row order, which is already top-down for PIL
    img = Image.fromarray(tex.to_rgba())
    img.save(path)
    print(f"Wrote {tex.width}x{tex.height} texture to {path}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
