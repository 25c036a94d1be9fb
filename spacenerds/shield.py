"""Shield strength profile as seen by a probe wavelength."""

import math


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")


def shield_strength(probe: int, strength: int, width: int, depth: int, wavelength: int) -> float:
    """Shield strength between 0 and 1 at the probe wavelength.

    All arguments are byte values. Outside the dip the baseline strength/255
    is returned; inside it a cosine-shaped weakness of the given depth applies.
    """
    for name, value in (
        ("probe", probe),
        ("strength", strength),
        ("width", width),
        ("depth", depth),
        ("wavelength", wavelength),
    ):
        _check_byte(name, value)

    dip1 = int(wavelength - width / 2.0)
    dip2 = int(wavelength + width / 2.0)
    baseline = strength / 255.0
    if probe < dip1 or probe > dip2:
        return baseline

    depth_f = depth / 255.0
    if dip2 == dip1:
        return math.nan
    angle = (probe - dip1) / (dip2 - dip1)
    angle = angle * 2 * math.pi * ((depth & 0x03) + 1)
    return (math.cos(angle) * 0.5 + 0.5) * (depth_f * strength / 255.0) + (1.0 - depth_f) * baseline