"""Stroke fonts built from glyphs drawn on a 5x7 grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

Point = Tuple[int, int]

# Grid cell that lifts the pen rather than drawing to a point.
_LP = 36

# Grid rows span y = -3 (top) .. 3 (bottom); columns x = 0 .. 4.
_GRID_COLUMNS = 5
_GRID_TOP = -3

_GLYPH_STROKES: Dict[str, Tuple[int, ...]] = {
    "{": (2, 6, 11, 15, 21, 26, 32),
    "}": (2, 8, 13, 19, 23, 28, 32),
    "Z": (0, 4, 20, 24),
    "Y": (0, 12, 22, _LP, 12, 4),
    "X": (0, 23, _LP, 20, 3),
    "W": (0, 21, 7, 23, 4),
    "V": (0, 22, 4),
    "U": (0, 15, 21, 23, 19, 4),
    "T": (0, 4, _LP, 2, 22),
    "S": (9, 3, 1, 5, 11, 13, 19, 23, 21, 15),
    "R": (20, 0, 3, 9, 13, 10, _LP, 13, 24),
    "Q": (1, 3, 9, 19, 23, 21, 15, 5, 1, _LP, 18, 24),
    "P": (20, 0, 3, 9, 13, 10),
    "O": (1, 3, 9, 19, 23, 21, 15, 5, 1),
    "N": (20, 0, 23, 3),
    "M": (20, 0, 17, 4, 24),
    "L": (0, 20, 23),
    "K": (0, 20, _LP, 15, 3, _LP, 12, 24),
    "J": (3, 18, 22, 21, 15),
    "I": (0, 2, _LP, 1, 21, _LP, 20, 22),
    "H": (0, 20, _LP, 3, 23, _LP, 10, 13),
    "G": (9, 3, 1, 5, 15, 21, 23, 19, 14, 12),
    "F": (20, 0, 3, _LP, 10, 12),
    "E": (23, 20, 0, 3, _LP, 10, 12),
    "D": (20, 0, 3, 9, 19, 23, 20),
    "C": (19, 23, 21, 15, 5, 1, 3, 9),
    "B": (20, 0, 3, 9, 13, 10, _LP, 13, 19, 23, 20),
    "A": (20, 2, 24, _LP, 11, 13),
    "/": (20, 3),
    "\\": (0, 23),
    "|": (2, 22),
    "?": (5, 1, 3, 9, 14, 17, 22, _LP, 27, 32),
    "!": (2, 22, _LP, 27, 32),
    ":": (6, 7, _LP, 16, 17),
    "(": (1, 5, 15, 21),
    ")": (0, 6, 16, 20),
    " ": (),
    "+": (2, 22, _LP, 10, 14),
    "-": (11, 13),
    "0": (1, 3, 9, 19, 23, 21, 15, 5, 1, _LP, 8, 16),
    "9": (15, 21, 23, 19, 9, 3, 1, 5, 11, 13, 9),
    "8": (11, 5, 1, 3, 9, 13, 11, 15, 21, 23, 19, 13),
    "7": (0, 4, 12, 21),
    "6": (15, 11, 13, 19, 23, 21, 15, 5, 1, 3, 9),
    "5": (4, 0, 10, 13, 19, 23, 21, 15),
    "4": (23, 3, 15, 19),
    "3": (0, 4, 12, 13, 19, 23, 21, 15),
    "2": (5, 1, 3, 9, 20, 24),
    "1": (5, 1, 21, _LP, 20, 22),
    ",": (21, 25),
    ".": (20, 21),
    "z": (10, 13, 20, 23),
    "y": (10, 21, _LP, 12, 30),
    "x": (10, 23, _LP, 20, 13),
    "w": (10, 21, 12, 23, 14),
    "v": (10, 21, 12),
    "u": (10, 15, 21, 22, 18, 13, 23),
    "t": (6, 21, 22, _LP, 10, 12),
    "s": (13, 10, 15, 18, 23, 20),
    "a": (10, 13, 23, 20, 15, 18),
    "b": (0, 20, 23, 13, 10),
    "c": (13, 10, 20, 23),
    "d": (3, 23, 20, 10, 13),
    "e": (15, 18, 13, 10, 20, 23),
    "f": (21, 1, 2, _LP, 10, 12),
    "g": (25, 28, 33, 30, 10, 13, 23, 20),
    "h": (0, 20, _LP, 10, 12, 18, 23),
    "i": (10, 20),
    "j": (12, 27, 31, 30),
    "k": (0, 20, _LP, 7, 15, _LP, 11, 23),
    "l": (0, 20),
    "m": (20, 10, 11, 17, 22, 12, 13, 19, 24),
    "n": (20, 10, 11, 17, 22),
    "o": (10, 13, 23, 20, 10),
    "p": (30, 10, 13, 23, 20),
    "q": (33, 13, 10, 20, 23),
    "r": (10, 20, _LP, 15, 11, 12, 18),
    "'": (2, 7),
    '"': (1, 6, _LP, 3, 8),
    "*": (7, 17, _LP, 11, 13, _LP, 6, 18, _LP, 16, 8),
    "_": (25, 29),
    "#": (6, 21, _LP, 8, 23, _LP, 10, 14, _LP, 15, 19),
    "$": (9, 3, 1, 5, 11, 13, 19, 23, 21, 15, _LP, 2, 27),
    "%": (4, 25, _LP, 1, 5, 11, 7, 1, _LP, 18, 22, 28, 24, 18),
    "^": (6, 2, 8),
    "&": (24, 6, 1, 2, 7, 15, 21, 23, 14),
    "@": (18, 8, 7, 11, 16, 18, 13, 19, 9, 3, 1, 5, 15, 21, 24),
    "<": (4, 10, 24),
    ">": (0, 14, 20),
    "]": (2, 4, 24, 22),
    "[": (2, 0, 20, 22),
    ";": (6, 7, _LP, 16, 17, 22),
    "~": (5, 1, 7, 3, 4),
}


def _decode(cell: int) -> Point:
    return cell % _GRID_COLUMNS, cell // _GRID_COLUMNS + _GRID_TOP


@dataclass(frozen=True)
class Glyph:
    """A prescaled glyph: points joined by lines, None where the pen lifts."""

    points: Tuple[Optional[Point], ...]
    bbx1: int = 0
    bby1: int = 0
    bbx2: int = 0
    bby2: int = 0


def _prerender(strokes: Sequence[int], xscale: int, yscale: int) -> Glyph:
    points = []
    bbx1 = bby1 = bbx2 = bby2 = 0
    for i, cell in enumerate(strokes):
        if cell == _LP:
            points.append(None)
            continue
        gx, gy = _decode(cell)
        x, y = gx * xscale, gy * yscale
        if i == 0 or x < bbx1:
            bbx1 = x
        if i == 0 or x > bbx2:
            bbx2 = x
        if i == 0 or y < bby1:
            bby1 = y
        if i == 0 or y > bby2:
            bby2 = y
        points.append((x, y))
    return Glyph(tuple(points), bbx1, bby1, bbx2, bby2)


def make_font(xscale: int, yscale: int) -> Dict[str, Glyph]:
    """Prerender every known glyph at the given scale, keyed by character."""
    return {ch: _prerender(strokes, xscale, yscale) for ch, strokes in _GLYPH_STROKES.items()}


def font_lineheight(yscale: int) -> int:
    """Height of a line of text, including two pixels of spacing."""
    top = _decode(0)[1]
    bottom = _decode(30)[1]
    return (bottom - top) * yscale + 2