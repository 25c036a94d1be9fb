"""Names of damage-control systems, parts, tools and damage descriptions."""

from typing import Sequence

DAMCON_PARTS_PER_SYSTEM = 3
UNKNOWN = "UNKNOWN"

SYSTEM_NAMES = (
    "SHIELD SYSTEM",
    "IMPULSE DRIVE",
    "WARP DRIVE",
    "MANEUVERING",
    "PHASER BANKS",
    "SENSORS",
    "COMMUNICATIONS",
    "TRACTOR BEAM",
    "REPAIR STATION",
)

PART_NAMES = (
    ("VON KURNATOWSKI FIELD GENERATOR", "FURION REFLECTOR MATRIX", "PHOTONIC CHARGE STABILIZER"),
    ("POSITRON EMITTER TUBE", "ANTIMATTER BACKFLASH SUPPRESSOR", "POSITRONIC CHARGING COIL"),
    ("TRANSIENT WORMHOLE SUPPRESSOR", "HIBBERT SPACE MULTIPLEXER", "SAGAN CONUNDRUM RESOLVER"),
    ("INERTIAL NAVIGATION MODULE", "HIBBERT SPACE TRANSFER COMPUTER", "FURION SPIN GYROSCOPE"),
    ("PHASED ENLUXINATOR", "ANNULAR PHASE CONJUGATOR", "SIX CHANNEL ROSE FREQUENCY MODULATOR"),
    ("FURION DETECTOR ARRAY", "SUBHARMONIC OMNI-STABILIZER", "FURION-PHOTON TRANSFORMER "),
    ("RADIONIC DETECTOR COIL", "HIBBERT SPACE FURIONIC AMPLIFIER", "FURIONIC FIELD MULTIPLEXER"),
    ("VAN GRINSVEN FIELD MODULATOR", "DUAL STAGE ION BRAKE", "GRAVITON INDUCTION UNIT"),
    # The repair station has no real parts; seeing these in play means a bug.
    ("RS BUG", "RS BUG", "RS BUG"),
)

TOOL_NAMES = (
    "Magneto-forceps",
    "photon wrench",
    "tuning knife",
    "furionic multimeter",
    "furionic calibrator",
    "Hibbert entangler",
)

DAMAGE_NAMES = (
    "is shorted out",
    "is blown",
    "has melted down",
    "is burned out",
    "has vaporized",
    "is destroyed",
    "has malfunctioned",
    "has faulted",
    "is malfunctioning",
    "is unresponsive",
    "needs to be replaced",
    "is not functional",
    "has ceased to be",
    "is pining for the fjords",
)


def _lookup(table: Sequence[str], index: int) -> str:
    if 0 <= index < len(table):
        return table[index]
    return UNKNOWN


def damcon_part_name(system: int, part: int) -> str:
    if not 0 <= system < len(PART_NAMES):
        return UNKNOWN
    if not 0 <= part < DAMCON_PARTS_PER_SYSTEM:
        return UNKNOWN
    return PART_NAMES[system][part]


def damcon_system_name(system: int) -> str:
    return _lookup(SYSTEM_NAMES, system)


def damcon_tool_name(tool: int) -> str:
    return _lookup(TOOL_NAMES, tool)


def damcon_damage_name(damage: int) -> str:
    return _lookup(DAMAGE_NAMES, damage)