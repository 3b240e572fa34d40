"""Recursive change tracking for nested dicts and lists."""

from .errors import InvalidTargetKindError, InvalidTrackerFunctionError, TrackChangesError
from .events import ChangeEvent, ChangeRecorder
from .factory import create_tracker
from .optype import OpType
from .proxy import TrackedContainer, TrackedDict, TrackedList, is_tracked, unwrap

__all__ = [
    "ChangeEvent",
    "ChangeRecorder",
    "InvalidTargetKindError",
    "InvalidTrackerFunctionError",
    "OpType",
    "TrackChangesError",
    "TrackedContainer",
    "TrackedDict",
    "TrackedList",
    "create_tracker",
    "is_tracked",
    "unwrap",
]
