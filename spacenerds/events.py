"""Mapping of named events to callback names, and schedules of callbacks to run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

MAX_CALLBACKS = 3


@dataclass(frozen=True)
class ScheduledCallback:
    """A callback name queued to run with three numeric parameters."""

    name: str
    params: Tuple[float, float, float]

    @property
    def nparams(self) -> int:
        return len(self.params)


class CallbackSchedule:
    """Callbacks waiting to run; the most recently added comes first."""

    def __init__(self) -> None:
        self._entries: List[ScheduledCallback] = []

    def add(self, name: str, param1: float, param2: float = 0.0, param3: float = 0.0) -> ScheduledCallback:
        entry = ScheduledCallback(name, (param1, param2, param3))
        self._entries.insert(0, entry)
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[ScheduledCallback]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


class EventCallbacks:
    """Registry of up to three callback names per event, in registration order."""

    def __init__(self) -> None:
        self._map: Dict[str, List[str]] = {}

    def register(self, event: str, callback: str) -> None:
        """Add a callback to an event; registrations beyond the limit are ignored."""
        callbacks = self._map.setdefault(event, [])
        if len(callbacks) < MAX_CALLBACKS:
            callbacks.append(callback)

    def callback_list(self, event: str) -> List[str]:
        return list(self._map.get(event, ()))

    def schedule(
        self,
        schedule: CallbackSchedule,
        event: str,
        param1: float,
        param2: float = 0.0,
        param3: float = 0.0,
    ) -> None:
        """Queue the event's first registered callback, if the event has any."""
        callbacks = self._map.get(event)
        if callbacks:
            schedule.add(callbacks[0], param1, param2, param3)

    def clear(self) -> None:
        self._map.clear()