"""The original stroke font, with glyphs drawn on a 3x7 grid."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from spacenerds.font import Glyph, Point

# Grid cell that lifts the pen rather than drawing to a point.
_LP = 21

# Grid rows span y = -4 (top) .. 2 (bottom); columns x = 0 .. 2.
_GRID_COLUMNS = 3
_GRID_TOP = -4

_GLYPH_STROKES: Dict[str, Tuple[int, ...]] = {
    "Z": (0, 2, 12, 14),
    "Y": (0, 7, 2, _LP, 7, 13),
    "X": (0, 14, _LP, 12, 2),
    "W": (0, 12, 10, 14, 2, _LP, 10, 1),
    "V": (0, 13, 2),
    "U": (0, 9, 13, 11, 2),
    "T": (13, 1, _LP, 0, 2),
    "S": (9, 13, 11, 3, 1, 5),
    "R": (12, 0, 1, 5, 7, 6, _LP, 7, 14),
    "Q": (13, 9, 3, 1, 5, 11, 13, _LP, 10, 14),
    "P": (12, 0, 1, 5, 7, 6),
    "O": (13, 9, 3, 1, 5, 11, 13),
    "N": (12, 0, 14, 2),
    "M": (12, 0, 4, 2, 14),
    "L": (0, 12, 14),
    "K": (0, 12, _LP, 6, 7, 11, 14, _LP, 7, 5, 2),
    "J": (9, 13, 11, 2),
    "I": (12, 14, _LP, 13, 1, _LP, 0, 2),
    "H": (0, 12, _LP, 2, 14, _LP, 6, 8),
    "G": (7, 8, 11, 13, 9, 3, 1, 5),
    "F": (12, 0, 2, _LP, 7, 6),
    "E": (14, 12, 0, 2, _LP, 6, 7),
    "D": (12, 13, 11, 5, 1, 0, 12),
    "C": (11, 13, 9, 3, 1, 5),
    "B": (0, 12, 13, 11, 5, 1, 0, _LP, 6, 8),
    "A": (12, 3, 0, 5, 14, _LP, 8, 6),
    "!": (10, 13, _LP, 1, 7),
    "/": (12, 2),
    "\\": (0, 14),
    "|": (1, 13),
    "?": (13, 10, _LP, 7, 5, 2, 0, 3),
    ":": (6, 7, _LP, 12, 13),
    "(": (2, 4, 10, 14),
    ")": (0, 4, 10, 12),
    "a": (6, 8, 14, 12, 9, 11),
    " ": (),
    "b": (0, 12, 14, 8, 6),
    "c": (8, 6, 12, 14),
    "d": (8, 6, 12, 14, 2),
    "e": (9, 11, 8, 6, 12, 14),
    "f": (13, 1, 2, _LP, 6, 8),
    "g": (11, 12, 6, 8, 20, 18),
    "h": (0, 12, _LP, 6, 8, 14),
    "i": (13, 7, _LP, 4, 2),
    "j": (18, 16, 7, _LP, 4, 2),
    "k": (0, 12, _LP, 6, 7, 11, 14, _LP, 7, 5),
    "l": (1, 13),
    "m": (12, 6, 8, 14, _LP, 7, 13),
    "n": (12, 6, 7, 13),
    "o": (12, 6, 8, 14, 12),
    "p": (18, 6, 8, 14, 12),
    "q": (14, 12, 6, 8, 20),
    "r": (12, 6, _LP, 9, 7, 8),
    "s": (8, 6, 9, 11, 14, 12),
    "t": (14, 13, 4, _LP, 6, 8),
    "u": (6, 12, 14, 8),
    "v": (6, 13, 8),
    "w": (6, 12, 14, 8, _LP, 7, 13),
    "x": (12, 8, _LP, 6, 14),
    "y": (6, 12, 14, _LP, 8, 17, 19, 18),
    "z": (6, 8, 12, 14),
    "0": (12, 0, 2, 14, 12, 2),
    "1": (1, 13),
    "2": (0, 2, 5, 9, 12, 14),
    "3": (0, 2, 14, 12, _LP, 6, 8),
    "4": (0, 6, 8, _LP, 2, 14),
    "5": (2, 0, 6, 8, 14, 12),
    "6": (2, 0, 12, 14, 8, 6),
    "7": (0, 2, 12),
    "8": (0, 2, 14, 12, 0, _LP, 6, 8),
    "9": (8, 6, 0, 2, 14),
    "-": (6, 8),
    "+": (6, 8, _LP, 7, 13),
    ",": (13, 16),
    ".": (12, 13),
    "'": (7, 5),
    '"': (0, 3, _LP, 1, 4),
    "*": (9, 5, _LP, 3, 11, _LP, 6, 8, _LP, 4, 10),
    "_": (18, 20),
}


def _decode(cell: int) -> Point:
    return cell % _GRID_COLUMNS, cell // _GRID_COLUMNS + _GRID_TOP


def _prerender(strokes: Sequence[int], xscale: int, yscale: int) -> Glyph:
    points = []
    for cell in strokes:
        if cell == _LP:
            points.append(None)
            continue
        gx, gy = _decode(cell)
        points.append((gx * xscale, gy * yscale))
    return Glyph(tuple(points))


def make_font(xscale: int, yscale: int) -> Dict[str, Glyph]:
    """Prerender every glyph of the original font at the given scale, keyed by character."""
    return {ch: _prerender(strokes, xscale, yscale) for ch, strokes in _GLYPH_STROKES.items()}