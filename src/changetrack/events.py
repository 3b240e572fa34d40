"""In-memory recording of tracker notifications.

ChangeRecorder is a ready-made tracker function: pass it to create_tracker
and inspect the recorded events afterwards.
"""

from dataclasses import dataclass
from typing import Any

from .optype import OpType


@dataclass(frozen=True)
class ChangeEvent:
    """One tracker notification."""

    op_type: OpType
    key: Any  # dict key, list index or slice, or "append"/"sort"
    value: Any = None  # New value; the live list for append/sort
    old_value: Any = None  # Previous value; a shallow copy for append/sort


class ChangeRecorder:
    """Tracker function that stores every notification it receives."""

    def __init__(self) -> None:
        self._events: list[ChangeEvent] = []

    def __call__(self, op_type: OpType, key: Any, value: Any = None, old_value: Any = None) -> None:
        self._events.append(ChangeEvent(op_type=op_type, key=key, value=value, old_value=old_value))

    @property
    def events(self) -> tuple[ChangeEvent, ...]:
        return tuple(self._events)

    def of_type(self, op_type: OpType) -> tuple[ChangeEvent, ...]:
        return tuple(event for event in self._events if event.op_type is op_type)

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
