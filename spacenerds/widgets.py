"""Interaction state of on-screen buttons and sliders."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

_LABEL_MAX = 19
_SHORT_LABEL_MAX = 4
_FEEDBACK_FRAMES = 5


class Color(enum.IntEnum):
    """Cardinal colour indexes."""

    BLACK = 0
    WHITE = 1
    OLD_BLUE = 2
    OLD_GREEN = 3
    YELLOW = 4
    RED = 5
    ORANGE = 6
    OLD_CYAN = 7
    MAGENTA = 8
    DARKGREEN = 9
    DARKRED = 10
    AMBER = 11
    LIMEGREEN = 12
    DARKTURQUOISE = 13
    ORANGERED = 14


@dataclass
class Button:
    """A clickable rectangle, optionally a checkbox bound to a holder's ``value``."""

    x: int
    y: int
    width: int
    height: int
    label: str
    color: int
    font: int
    callback: Optional[Callable[[], None]] = None
    checkbox: Optional[Any] = field(default=None, init=False)
    feedback: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.set_label(self.label)

    def set_label(self, label: str) -> None:
        self.label = label[:_LABEL_MAX]

    def make_checkbox(self, holder: Any) -> None:
        """Bind the button to an object whose ``value`` attribute it toggles."""
        self.checkbox = holder

    def press(self, x: int, y: int) -> bool:
        """Handle a click; return True if it landed on the button."""
        if x < self.x or x > self.x + self.width or y < self.y or y > self.y + self.height:
            return False
        if self.callback is not None:
            self.callback()
        if self.checkbox is not None:
            self.checkbox.value = not self.checkbox.value
        self.feedback = _FEEDBACK_FRAMES
        return True

    def tick(self) -> bool:
        """Advance one frame; return True if press feedback shows in this frame."""
        if not self.feedback:
            return False
        self.feedback -= 1
        return True


@dataclass
class Slider:
    """A horizontal or vertical bar showing a monitored value and taking input."""

    x: float
    y: float
    length: float
    height: float
    color: int
    label: str
    label1: str
    label2: str
    r1: float
    r2: float
    monitor: Callable[[], float]
    clicked: Optional[Callable[["Slider"], None]] = None
    vertical: bool = False
    colors_reversed: bool = False
    font: Optional[int] = None
    sound: Optional[Callable[[], None]] = None
    value: float = field(default=0.0, init=False)
    input: float = field(default=0.0, init=False)
    timer: int = field(default=0, init=False)
    fuzz: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.r1 == self.r2:
            raise ValueError("slider range must not be empty")
        self.label = self.label[:_LABEL_MAX]
        self.label1 = self.label1[:_SHORT_LABEL_MAX]
        self.label2 = self.label2[:_SHORT_LABEL_MAX]
        self.value = self._normalize(self.monitor())

    def _normalize(self, v: float) -> float:
        return (v - self.r1) / (self.r2 - self.r1)

    def sample(self) -> float:
        """Read the monitored value once per frame, updating ``value`` (0..1 of the range)."""
        self.timer = (self.timer + 1) & 0xFF
        v = self.monitor()
        self.value = self._normalize(v)
        return v

    def bar_color(self, v: float) -> Color:
        """Colour of the bar for a sampled value; low (or high, if reversed) values blink."""
        blink = Color.BLACK if (self.timer & 0x04) == 0 else Color.RED
        if self.clicked is not None:
            return Color.DARKGREEN
        if not self.colors_reversed:
            if v <= 10.0:
                return blink
            if v <= 25.0:
                return Color.AMBER
            return Color.DARKGREEN
        if v < 75.0:
            return Color.DARKGREEN
        if v < 90.0:
            return Color.AMBER
        return blink

    def _fire(self, with_sound: bool) -> None:
        if self.clicked is not None:
            self.clicked(self)
            if with_sound and self.sound is not None:
                self.sound()

    def press(self, x: float, y: float) -> bool:
        """Handle a click; return True if it landed on the slider, setting ``input``."""
        if self.vertical:
            if (
                x < self.x
                or x > self.x + self.height
                or y < self.y - 5
                or y > self.y + self.length + 5
            ):
                return False
            if y >= self.y + self.length:
                self.input = 0.0
            elif y <= self.y:
                self.input = 1.0
            else:
                self.input = (self.y + self.length - y) / self.length
        else:
            if (
                x < self.x - 5
                or x > self.x + self.length + 5
                or y < self.y
                or y > self.y + self.height
            ):
                return False
            if x >= self.x + self.length:
                self.input = 1.0
            elif x <= self.x:
                self.input = 0.0
            else:
                self.input = (x - self.x) / self.length
        self._fire(True)
        return True

    def poke_input(self, value: float, with_sound: bool = True) -> None:
        """Set ``input`` as if the user had moved the slider."""
        self.input = value
        self._fire(with_sound)

    def set_fuzz(self, fuzz: int) -> None:
        self.fuzz = fuzz & 0xFF