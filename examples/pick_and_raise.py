"""Pick curves the way a pointer handler would and raise the picked one to the top.

Run directly with:
    python examples/pick_and_raise.py
"""
from tfeditor import Editor, RasterCache, Tent


def main() -> None:
    editor = Editor(show_outline=False)
    left = Tent(tip=(0.35, 0.9), top_width=0.1, bottom_width=0.6)
    right = Tent(tip=(0.65, 0.9), top_width=0.1, bottom_width=0.6)
    editor.add_function(left)
    editor.add_function(right)

    cache = RasterCache(editor)
    cache.rasterize(128, 64)

    # Both tents cover (0.5, 0.2); the most recently added one wins
    picked = editor.select((0.5, 0.2))
    print("picked:", "right" if picked is right else "left")

    editor.move_to_top(left)
    picked = editor.select((0.5, 0.2))
    print("after move_to_top:", "right" if picked is right else "left")
    print("cache stale:", cache.is_stale(128, 64))

    print("alpha envelope:", editor.get_alpha(5))


if __name__ == "__main__":
    main()
