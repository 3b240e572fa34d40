"""Tracker errors."""

from __future__ import annotations

from typing import Any


class TrackChangesError(Exception):
    """Base class for errors raised by changetrack."""


class InvalidTargetKindError(TrackChangesError, TypeError):
    """Raised when the object to watch is not a dict or a list."""

    def __init__(self, target: Any) -> None:
        self.target_type = type(target).__name__
        super().__init__(f"target must be a dict or a list, got {self.target_type}")


class InvalidTrackerFunctionError(TrackChangesError, TypeError):
    """Raised when the tracker function is not callable."""

    def __init__(self, tracker_fn: Any) -> None:
        self.tracker_type = type(tracker_fn).__name__
        super().__init__(f"tracker_fn must be callable, got {self.tracker_type}")
