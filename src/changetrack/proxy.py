"""Recursive change-tracking wrappers for dicts and lists.

A wrapper stands in for its target and reports every item read, item write
and item deletion to a tracker function before delegating to the target:
- wrapper["name"] reports GET for primitive values
- wrapper["address"] returns a new wrapper around the nested dict, unreported
- wrapper["name"] = "x" reports SET with the previous value, then assigns
- del wrapper["name"] reports DELETE, then deletes
- wrapper.append(x) / wrapper.sort() mutate first, then report with a snapshot

The target stays the source of truth: wrappers hold no state of their own
and a new one is minted on every read of a nested container.
"""

import logging
from collections.abc import Callable, ItemsView, Iterator, MutableMapping, MutableSequence, ValuesView
from typing import Any

from .logger import get_logger
from .optype import OpType

_log = get_logger("changetrack.proxy")

TrackerFn = Callable[..., Any]

# List methods that mutate in place and are reported after they run
_MUTATORS = {"append": OpType.SET, "sort": OpType.SORT}


def is_composite(value: Any) -> bool:
    """True for values that get their own wrapper on read."""
    return isinstance(value, (dict, list))


def is_tracked(value: Any) -> bool:
    return isinstance(value, TrackedContainer)


def unwrap(value: Any) -> Any:
    """Return the target behind a wrapper, or the value itself."""
    if isinstance(value, TrackedContainer):
        return value._target
    return value


def wrap(value: Any, tracker_fn: TrackerFn) -> Any:
    """Wrap dicts and lists, pass everything else through."""
    if isinstance(value, dict):
        return TrackedDict(value, tracker_fn)
    if isinstance(value, list):
        return TrackedList(value, tracker_fn)
    return value


class TrackedContainer:
    """Shared item access for TrackedDict and TrackedList.

    Attribute access falls through to the target untracked, so methods
    like dict.setdefault or list.pop mutate without a report.
    """

    __slots__ = ("_target", "_tracker_fn")

    _target: Any
    _tracker_fn: TrackerFn

    def __init__(self, target: Any, tracker_fn: TrackerFn) -> None:
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_tracker_fn", tracker_fn)

    # --- Intercepted item access ---

    def __getitem__(self, key: Any) -> Any:
        value = self._target[key]
        if is_composite(value):
            return wrap(value, self._tracker_fn)
        self._notify(OpType.GET, key, value)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        value = unwrap(value)
        old_value = self._old_value(key)
        self._notify(OpType.SET, key, value, old_value)
        self._target[key] = value

    def __delitem__(self, key: Any) -> None:
        self._notify(OpType.DELETE, key)
        del self._target[key]

    def _old_value(self, key: Any) -> Any:
        return self._target[key]

    def _notify(self, op_type: OpType, key: Any, *args: Any) -> None:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(
                f"{op_type.name} {key!r} on {type(self._target).__name__}",
                extra={
                    "event": "tracker_notify",
                    "op_type": op_type.name,
                    "property_key": repr(key),
                },
            )
        try:
            self._tracker_fn(op_type, key, *args)
        except Exception as exc:
            _log.error(
                f"Tracker function failed on {op_type.name} {key!r}",
                extra={
                    "event": "tracker_fn_error",
                    "op_type": op_type.name,
                    "property_key": repr(key),
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                },
                exc_info=True,
            )
            raise

    # --- Untracked pass-through ---

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; guard slots against recursion
        if name in TrackedContainer.__slots__:
            raise AttributeError(name)
        return getattr(self._target, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"{type(self).__name__} does not support attribute assignment; use item assignment for '{name}'"
        )

    def __len__(self) -> int:
        return len(self._target)

    def __contains__(self, item: Any) -> bool:
        return unwrap(item) in self._target

    def __eq__(self, other: Any) -> bool:
        return self._target == unwrap(other)

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    def __str__(self) -> str:
        return str(self._target)

    # --- Copying shares the target, like any other new wrapper ---

    def __copy__(self) -> "TrackedContainer":
        return type(self)(self._target, self._tracker_fn)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._target, self._tracker_fn))


class TrackedDict(TrackedContainer):
    """Wrapper around a dict.

    get(), values() and items() read through __getitem__, so they report
    like direct reads. update() writes through __setitem__. Iterating
    yields keys without reporting.
    """

    __slots__ = ()

    def _old_value(self, key: Any) -> Any:
        return self._target.get(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._target)

    def get(self, key: Any, default: Any = None) -> Any:
        """Read like self[key]; a missing key reads the default instead.

        A dict or list default is wrapped and not reported, the same as a
        nested container read.
        """
        if key in self._target:
            return self[key]
        if is_composite(default):
            return wrap(default, self._tracker_fn)
        self._notify(OpType.GET, key, default)
        return default

    def values(self) -> "TrackedValuesView":
        return TrackedValuesView(self)

    def items(self) -> "TrackedItemsView":
        return TrackedItemsView(self)

    def update(self, other: Any = (), /, **kwargs: Any) -> None:
        """dict.update with one SET report per assigned key."""
        other = unwrap(other)
        if hasattr(other, "keys"):
            for key in other.keys():
                self[key] = other[key]
        else:
            for key, value in other:
                self[key] = value
        for key, value in kwargs.items():
            self[key] = value


class TrackedList(TrackedContainer):
    """Wrapper around a list.

    append() and sort() are reported with the mutated target as the new
    value and a shallow pre-mutation copy as the old value. The reported
    key is the method name. Other list methods pass through untracked.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self._target)):
            yield self[index]

    # --- Concatenation (untracked, like other list methods) ---

    def __iadd__(self, other: Any) -> "TrackedList":
        """Extend in place; ``parent[key] += ...`` then reports one SET on assignment back."""
        self._target.extend(unwrap(other))
        return self

    def __add__(self, other: Any) -> list[Any]:
        return self._target + unwrap(other)

    def __radd__(self, other: Any) -> list[Any]:
        return unwrap(other) + self._target

    def append(self, value: Any) -> None:
        return self._apply_mutator("append", unwrap(value))

    def sort(self, *, key: Callable[[Any], Any] | None = None, reverse: bool = False) -> None:
        return self._apply_mutator("sort", key=key, reverse=reverse)

    def _apply_mutator(self, name: str, *args: Any, **kwargs: Any) -> Any:
        old_value = list(self._target)
        result = getattr(self._target, name)(*args, **kwargs)
        self._notify(_MUTATORS[name], name, self._target, old_value)
        return result


class TrackedValuesView:
    """Live values view of a TrackedDict; iterating reads through the wrapper."""

    __slots__ = ("_tracked",)

    def __init__(self, tracked: TrackedDict) -> None:
        self._tracked = tracked

    def __len__(self) -> int:
        return len(self._tracked._target)

    def __iter__(self) -> Iterator[Any]:
        for key in list(self._tracked._target):
            yield self._tracked[key]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tracked._target!r})"


class TrackedItemsView(TrackedValuesView):
    """Live items view of a TrackedDict."""

    __slots__ = ()

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for key in list(self._tracked._target):
            yield key, self._tracked[key]


MutableMapping.register(TrackedDict)
MutableSequence.register(TrackedList)
ValuesView.register(TrackedValuesView)
ItemsView.register(TrackedItemsView)
