"""Factions of the game universe: names, home positions and mutual hostility."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterator, List, Union

from spacenerds.vec3 import Vec3

MAX_FACTIONS = 20
DEFAULT_FACTION_HOSTILITY = 0.03
FACTION_HOSTILITY_THRESHOLD = 0.25

_HOSTILITY = re.compile(r"hostility\s*([A-Za-z]+)\s*([A-Za-z]+)\s*([+-]?\d+)")
_COORDS = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)\s+([+-]?\d+)")


class FactionError(Exception):
    """Raised for a malformed faction file or an impossible faction query."""


@dataclass(frozen=True)
class Faction:
    """A named faction centred on a point in space."""

    name: str
    center: Vec3


class FactionTable:
    """The known factions, in file order, with a symmetric hostility matrix."""

    def __init__(self) -> None:
        self._factions: List[Faction] = []
        self._hostility = [
            [0.0 if i == j else DEFAULT_FACTION_HOSTILITY for j in range(MAX_FACTIONS)]
            for i in range(MAX_FACTIONS)
        ]

    def __len__(self) -> int:
        return len(self._factions)

    def __iter__(self) -> Iterator[Faction]:
        return iter(self._factions)

    def _add(self, faction: Faction) -> None:
        if len(self._factions) >= MAX_FACTIONS:
            raise FactionError(f"at most {MAX_FACTIONS} factions are supported")
        self._factions.append(faction)

    def _lookup(self, name: str) -> int:
        for index, faction in enumerate(self._factions):
            if faction.name == name:
                return index
        raise FactionError(f"Bad faction '{name}'")

    def _set_hostility(self, name1: str, name2: str, percent: int) -> None:
        f1 = self._lookup(name1)
        f2 = self._lookup(name2)
        value = percent / 100.0
        self._hostility[f1][f2] = value
        self._hostility[f2][f1] = value

    def name(self, index: int) -> str:
        return self._factions[index].name

    def center(self, index: int) -> Vec3:
        return self._factions[index].center

    def nearest(self, v: Vec3) -> int:
        """Index of the faction whose center is closest to v; the first wins a tie."""
        if not self._factions:
            raise FactionError("no factions are known")
        return min(
            range(len(self._factions)),
            key=lambda i: (v - self._factions[i].center).len2(),
        )

    def hostility(self, f1: int, f2: int) -> float:
        """Hostility between two factions, 0.0 if either index is out of range."""
        count = len(self._factions)
        if f1 < 0 or f2 < 0 or f1 >= count or f2 >= count:
            return 0.0
        return self._hostility[f1][f2]


def read_factions(path: Union[str, "os.PathLike[str]"]) -> FactionTable:
    """Read a faction file.

    Each faction is a name line followed by a line of three integer
    coordinates. Lines starting with '#' are comments, and lines of the form
    ``hostility NAME NAME PERCENT`` set the hostility between two factions
    already read. At most MAX_FACTIONS factions are read.
    """
    table = FactionTable()
    with open(path, encoding="utf-8") as f:
        lines = enumerate(f, start=1)
        for lineno, raw in lines:
            if len(table) >= MAX_FACTIONS:
                break
            line = raw.rstrip("\r\n")
            if line.startswith("#"):
                continue
            if line.startswith("hostility "):
                match = _HOSTILITY.match(line)
                if not match:
                    raise FactionError(f"bad faction hostility {path}:{lineno}")
                try:
                    table._set_hostility(match.group(1), match.group(2), int(match.group(3)))
                except FactionError as exc:
                    raise FactionError(f"bad faction hostility {path}:{lineno}: {exc}") from None
                continue
            following = next(lines, None)
            if following is None:
                break
            coord_lineno, coord_raw = following
            coords = coord_raw.rstrip("\r\n")
            match = _COORDS.match(coords)
            if not match:
                raise FactionError(f"bad line '{coords}' at {path}:{coord_lineno}")
            x, y, z = (float(int(g)) for g in match.groups())
            table._add(Faction(line, Vec3(x, y, z)))
    return table