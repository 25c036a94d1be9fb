"""Ship classes and the ship type table read from a text file."""

from __future__ import annotations

import enum
import logging
import os
import re
from dataclasses import dataclass
from typing import List, Union

logger = logging.getLogger(__name__)

_LINE = re.compile(r"\s*(\S+)\s+([+-]?\d+)\s+([+-]?\d+)")


class ShipClass(enum.IntEnum):
    CRUISER = 0
    DESTROYER = 1
    FREIGHTER = 2
    TANKER = 3
    TRANSPORT = 4
    BATTLESTAR = 5
    STARSHIP = 6
    ASTEROIDMINER = 7
    SCIENCE = 8
    SCOUT = 9
    DRAGONHAWK = 10
    SKORPIO = 11
    DISRUPTOR = 12
    RESEARCH_VESSEL = 13
    CONQUERER = 14
    SCRAMBLER = 15
    SWORDFISH = 16
    WOMBAT = 17


@dataclass(frozen=True)
class ShipType:
    """One ship class: its name, top speed and largest crew."""

    class_name: str
    max_speed: float
    crew_max: int


def read_ship_types(path: Union[str, "os.PathLike[str]"]) -> List[ShipType]:
    """Read ship types, one per line as ``CLASS SPEED_X100 CREW_MAX``.

    Lines starting with '#' are comments; malformed lines are logged and skipped.
    """
    types: List[ShipType] = []
    with open(path, encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if line.startswith("#"):
                continue
            match = _LINE.match(line)
            if not match:
                logger.warning("Error at line %d in %s: '%s'", lineno, path, line)
                continue
            class_name, speed, crew = match.groups()
            types.append(ShipType(class_name, int(speed) / 100.0, int(crew)))
    return types