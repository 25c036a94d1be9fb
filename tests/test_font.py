import pytest

from spacenerds.font import Glyph, font_lineheight, make_font


def test_letter_a_points_at_unit_scale():
    glyph = make_font(1, 1)["A"]
    assert glyph.points == ((0, 1), (2, -3), (4, 1), None, (1, -1), (3, -1))


def test_font_covers_letters_and_digits():
    font = make_font(1, 1)
    for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789":
        assert ch in font
    assert all(isinstance(g, Glyph) for g in font.values())


def test_space_has_no_points():
    glyph = make_font(3, 3)[" "]
    assert glyph.points == ()
    assert (glyph.bbx1, glyph.bby1, glyph.bbx2, glyph.bby2) == (0, 0, 0, 0)


def test_unknown_character_absent():
    assert "\t" not in make_font(1, 1)


@pytest.mark.parametrize("xscale,yscale", [(2, 3), (5, 7)])
def test_scaling_multiplies_points(xscale, yscale):
    base = make_font(1, 1)
    scaled = make_font(xscale, yscale)
    for ch, glyph in base.items():
        expected = tuple(
            None if p is None else (p[0] * xscale, p[1] * yscale) for p in glyph.points
        )
        assert scaled[ch].points == expected


def test_bounding_box_contains_all_points():
    for glyph in make_font(4, 5).values():
        for p in glyph.points:
            if p is None:
                continue
            assert glyph.bbx1 <= p[0] <= glyph.bbx2
            assert glyph.bby1 <= p[1] <= glyph.bby2


def test_bounding_box_is_tight():
    for glyph in make_font(2, 2).values():
        pts = [p for p in glyph.points if p is not None]
        if not pts:
            continue
        assert glyph.bbx1 == min(p[0] for p in pts)
        assert glyph.bbx2 == max(p[0] for p in pts)
        assert glyph.bby1 == min(p[1] for p in pts)
        assert glyph.bby2 == max(p[1] for p in pts)


def test_pen_lift_in_t():
    assert None in make_font(1, 1)["T"].points
    assert None not in make_font(1, 1)["Z"].points


def test_lineheight_base_spacing():
    assert font_lineheight(0) == 2


def test_lineheight_is_linear():
    step = font_lineheight(1) - font_lineheight(0)
    assert font_lineheight(5) == font_lineheight(0) + 5 * step


def test_lineheight_covers_glyph_height():
    font = make_font(1, 3)
    tallest = max(g.bby2 - g.bby1 for g in font.values())
    assert font_lineheight(3) >= tallest