import numpy as np
import pytest

from tfeditor import (
    Box, Checkers, ColorMap, Editor, Gaussian, PiecewiseLinear, Tent, over, pack, unpack,
)
from tfeditor.types.defaults import FUNCTION_FILL_COLOR, OUTLINE_COLOR

FILL = pack(FUNCTION_FILL_COLOR)
OUTLINE = pack(OUTLINE_COLOR)


class SolidFunction(PiecewiseLinear):
    """Flat curve whose area is drawn in an opaque color of its own."""

    def __init__(self, level, rgba):
        super().__init__([(0.0, level), (1.0, level)])
        self.pixel = pack(rgba)

    def rasterize(self, width, height):
        tex = super().rasterize(width, height)
        tex.data[tex.data != 0] = self.pixel
        return tex


def test_empty_editor_rasterizes_transparent():
    editor = Editor()
    tex = editor.rasterize(16, 8)
    assert (tex.width, tex.height) == (16, 8)
    assert not tex.data.any()


def test_add_function_appends_on_top():
    editor = Editor()
    a, b = Tent(), PiecewiseLinear()
    editor.add_function(a)
    editor.add_function(b)
    assert editor.functions == (a, b)
    assert len(editor) == 2
    assert a in editor


def test_add_function_type_check():
    with pytest.raises(TypeError):
        Editor().add_function(Checkers())


def test_set_background_replaces_and_clears():
    editor = Editor()
    first, second = Checkers(4), Checkers(8)
    editor.set_background(first)
    editor.set_background(second)
    assert editor.background is second
    editor.set_background(None)
    assert editor.background is None
    with pytest.raises(TypeError):
        editor.set_background("checkers")


def test_move_to_top():
    editor = Editor()
    a, b, c = Tent(), Tent(), Tent()
    for f in (a, b, c):
        editor.add_function(f)
    editor.move_to_top(a)
    assert editor.functions == (b, c, a)
    editor.move_to_top(a)
    assert editor.functions == (b, c, a)


def test_move_to_top_is_noop_when_absent():
    editor = Editor()
    a = Tent()
    editor.add_function(a)
    revision = editor.revision
    editor.move_to_top(Tent())
    assert editor.functions == (a,)
    assert editor.revision == revision


def test_membership_is_by_identity():
    editor = Editor()
    a, twin = PiecewiseLinear(), PiecewiseLinear()
    editor.add_function(a)
    editor.add_function(PiecewiseLinear())
    editor.move_to_top(twin)
    assert editor.functions[0] is a
    assert twin not in editor


def test_eval_is_pointwise_maximum():
    editor = Editor()
    assert editor.eval(0.5) == 0.0
    editor.add_function(PiecewiseLinear([(0.0, 0.0), (1.0, 1.0)]))
    editor.add_function(PiecewiseLinear([(0.0, 1.0), (1.0, 0.0)]))
    assert editor.eval(0.0) == 1.0
    assert editor.eval(0.25) == 0.75
    assert editor.eval(0.5) == 0.5
    assert editor.eval(0.8) == pytest.approx(0.8)
    assert editor.eval(1.5) == 0.0


def test_select_prefers_topmost():
    editor = Editor()
    low, high = Tent(), Tent(tip=(0.5, 0.9), bottom_width=0.8)
    editor.add_function(low)
    editor.add_function(high)
    assert editor.select((0.5, 0.2)) is high
    editor.move_to_top(low)
    assert editor.select((0.5, 0.2)) is low


def test_select_falls_through_to_lower_curves():
    editor = Editor()
    wide, narrow = Tent(), Tent(tip=(0.5, 0.5), bottom_width=0.2)
    editor.add_function(wide)
    editor.add_function(narrow)
    # Above the narrow tent but under the wide one
    assert editor.select((0.5, 0.7)) is wide
    assert editor.select((0.1, 0.1)) is wide


def test_select_none():
    editor = Editor()
    assert editor.select((0.5, 0.5)) is None
    editor.add_function(Tent())
    assert editor.select((0.5, 1.0)) is None
    assert editor.select((0.0, 0.0)) is None


def test_later_function_dominates_overlap():
    editor = Editor(show_outline=False)
    red = SolidFunction(1.0, (1.0, 0.0, 0.0, 1.0))
    blue = SolidFunction(1.0, (0.0, 0.0, 1.0, 1.0))
    editor.add_function(red)
    editor.add_function(blue)
    tex = editor.rasterize(8, 4)
    assert all(int(p) == blue.pixel for p in tex.data)

    editor.move_to_top(red)
    tex = editor.rasterize(8, 4)
    assert all(int(p) == red.pixel for p in tex.data)


def test_translucent_fill_is_composited_over_background():
    editor = Editor(show_outline=False)
    editor.set_background(Checkers(4, (0.0, 0.0, 0.0), (1.0, 1.0, 1.0)))
    editor.add_function(PiecewiseLinear([(0.0, 0.5), (1.0, 0.5)]))
    tex = editor.rasterize(8, 8)

    on_black = pack(over(unpack(FILL), (0.0, 0.0, 0.0, 1.0)))
    on_white = pack(over(unpack(FILL), (1.0, 1.0, 1.0, 1.0)))
    assert tex.get(0, 0) == on_black
    assert tex.get(4, 0) == on_white
    # Above the curve the checkerboard shows through untouched
    assert tex.get(0, 7) == pack((1.0, 1.0, 1.0, 1.0))
    assert tex.get(4, 7) == pack((0.0, 0.0, 0.0, 1.0))


def test_background_is_always_below_functions():
    editor = Editor(show_outline=False)
    editor.add_function(SolidFunction(1.0, (1.0, 0.0, 0.0, 1.0)))
    editor.set_background(Checkers(1))
    tex = editor.rasterize(4, 4)
    assert all(int(p) == pack((1.0, 0.0, 0.0, 1.0)) for p in tex.data)


def test_outline_marks_envelope():
    editor = Editor()
    editor.add_function(PiecewiseLinear([(0.0, 0.5), (1.0, 0.5)]))
    tex = editor.rasterize(6, 10)
    for x in range(6):
        assert tex.get(x, 5) == OUTLINE
        assert tex.get(x, 4) == FILL


def test_outline_clamps_top_row_and_skips_zero():
    editor = Editor()
    editor.add_function(PiecewiseLinear([(0.0, 0.0), (1.0, 1.0)]))
    tex = editor.rasterize(5, 8)
    # Envelope is 1.0 at the last column; drawn in the top row
    assert tex.get(4, 7) == OUTLINE
    # Envelope is 0 at the first column; no outline there
    assert all(tex.get(0, y) != OUTLINE for y in range(8))


def test_outline_can_be_disabled():
    editor = Editor(show_outline=False)
    editor.add_function(Tent())
    tex = editor.rasterize(32, 16)
    assert not (tex.data == OUTLINE).any()


def test_rasterize_is_idempotent():
    editor = Editor(background=Checkers(8))
    editor.add_function(Tent(tip=(0.3, 0.8), top_width=0.1, bottom_width=0.5))
    editor.add_function(PiecewiseLinear([(0.0, 0.2), (1.0, 0.6)]))
    first = editor.rasterize(64, 32)
    second = editor.rasterize(64, 32)
    assert first == second
    assert first.tobytes() == second.tobytes()


def test_zero_area_rasterize_warns():
    editor = Editor()
    editor.add_function(Tent())
    with pytest.warns(RuntimeWarning):
        tex = editor.rasterize(0, 16)
    assert tex.data.size == 0


def test_get_alpha_and_rgb():
    editor = Editor()
    editor.add_function(Tent())
    alpha = editor.get_alpha(5)
    assert np.allclose(alpha, [0.0, 0.5, 1.0, 0.5, 0.0])
    rgb = editor.get_rgb(5)
    assert rgb.shape == (5, 3)
    assert np.array_equal(rgb[:, 0], alpha)
    assert np.array_equal(rgb[:, 2], alpha)
    assert editor.get_alpha(1).tolist() == [0.0]
    with pytest.raises(ValueError):
        editor.get_alpha(0)


def test_sample_matches_eval():
    editor = Editor()
    editor.add_function(Tent(tip=(0.2, 0.6), bottom_width=0.3))
    editor.add_function(PiecewiseLinear([(0.4, 0.1), (0.9, 0.9)]))
    xs = np.linspace(0, 1, 41)
    assert editor.sample(xs).tolist() == [editor.eval(float(x)) for x in xs]


def test_revision_tracks_mutations():
    editor = Editor()
    start = editor.revision
    editor.add_function(Tent())
    editor.set_background(Checkers())
    editor.show_outline = False
    assert editor.revision == start + 3


@pytest.mark.parametrize("cls", [Box, Gaussian, ColorMap])
def test_curveless_variants_never_reach_the_stack(cls):
    editor = Editor()
    editor.add_function(Tent())
    with pytest.raises(TypeError):
        editor.add_function(cls())
    assert len(editor) == 1
    assert editor.rasterize(16, 8).width == 16
    assert editor.get_alpha(3).tolist() == [0.0, 1.0, 0.0]
