"""Entry point for watching an object for changes."""

from typing import Any

from .errors import InvalidTargetKindError, InvalidTrackerFunctionError
from .logger import get_logger
from .proxy import TrackedDict, TrackedList, TrackerFn, is_composite, wrap

_log = get_logger("changetrack.factory")


def create_tracker(target: Any, tracker_fn: TrackerFn) -> TrackedDict | TrackedList:
    """Watch a dict or list for changes.

    Args:
        target: Object to watch. Mutations through the returned wrapper land
            on it directly, at any depth.
        tracker_fn: Called as ``tracker_fn(op_type, key, value, old_value)``
            on every tracked operation. GET passes three arguments and DELETE
            passes two, so trailing parameters should have defaults.

    Returns:
        TrackedDict or TrackedList wrapping the target

    Raises:
        InvalidTargetKindError: target is not a dict or a list
        InvalidTrackerFunctionError: tracker_fn is not callable
    """
    if not is_composite(target):
        raise InvalidTargetKindError(target)
    if not callable(tracker_fn):
        raise InvalidTrackerFunctionError(tracker_fn)

    _log.debug(
        f"Tracking {type(target).__name__} with {len(target)} entries",
        extra={
            "event": "tracker_created",
            "target_type": type(target).__name__,
            "tracker_fn": getattr(tracker_fn, "__qualname__", type(tracker_fn).__name__),
        },
    )
    return wrap(target, tracker_fn)
