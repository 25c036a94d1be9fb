import string

import pytest

from spacenerds.font import Glyph
from spacenerds.legacy_font import make_font


def test_character_set():
    font = make_font(1, 1)
    expected = set(string.ascii_letters) | set(string.digits) | set("!/\\|?:() -+,.'\"*_")
    assert set(font) == expected


def test_characters_missing_from_original_font():
    font = make_font(1, 1)
    for ch in "#{}@<>[];~$%^&":
        assert ch not in font


def test_space_has_no_points():
    font = make_font(4, 4)
    assert font[" "].points == ()


def test_letter_l_at_unit_scale():
    font = make_font(1, 1)
    assert font["L"].points == ((0, -4), (0, 0), (2, 0))


def test_letter_a_has_one_pen_lift():
    font = make_font(1, 1)
    points = font["A"].points
    assert points.count(None) == 1
    assert points[0] == (0, 0)


@pytest.mark.parametrize("xscale,yscale", [(2, 3), (5, 7), (10, 1)])
def test_scaling_is_linear(xscale, yscale):
    base = make_font(1, 1)
    scaled = make_font(xscale, yscale)
    for ch, glyph in base.items():
        expected = tuple(
            None if p is None else (p[0] * xscale, p[1] * yscale) for p in glyph.points
        )
        assert scaled[ch].points == expected


def test_points_lie_on_grid():
    font = make_font(3, 2)
    for glyph in font.values():
        for p in glyph.points:
            if p is None:
                continue
            x, y = p
            assert x in (0, 3, 6)
            assert y % 2 == 0 and -8 <= y <= 4


def test_glyphs_never_start_or_end_with_pen_lift():
    font = make_font(1, 1)
    drawn = {ch: glyph.points for ch, glyph in font.items() if glyph.points}
    assert set(font) - set(drawn) == {" "}
    bad = [ch for ch, points in drawn.items() if points[0] is None or points[-1] is None]
    assert bad == []


def test_glyph_type_and_default_bounding_box():
    glyph = make_font(2, 2)["O"]
    assert isinstance(glyph, Glyph)
    assert (glyph.bbx1, glyph.bby1, glyph.bbx2, glyph.bby2) == (0, 0, 0, 0)
    assert glyph.points[0] == glyph.points[-1]


def test_digit_one_and_lowercase_l_share_strokes():
    font = make_font(3, 3)
    assert font["1"].points == font["l"].points
    assert font["1"].points == font["|"].points


def test_fonts_are_independent():
    a = make_font(1, 1)
    b = make_font(1, 1)
    assert a == b
    assert a is not b
    assert make_font(2, 2)["Z"] != a["Z"]