"""Tests for ChangeRecorder."""

import dataclasses

import pytest

from changetrack import ChangeEvent, ChangeRecorder, OpType, create_tracker


class TestChangeRecorder:
    def test_records_calls_in_order(self) -> None:
        """Each call becomes one event, missing arguments default to None."""
        recorder = ChangeRecorder()
        recorder(OpType.GET, "name", "furqan")
        recorder(OpType.DELETE, "age")

        assert recorder.events == (
            ChangeEvent(OpType.GET, "name", "furqan", None),
            ChangeEvent(OpType.DELETE, "age", None, None),
        )

    def test_events_is_a_snapshot(self) -> None:
        """Later calls do not change a previously returned tuple."""
        recorder = ChangeRecorder()
        recorder(OpType.GET, "a", 1)
        snapshot = recorder.events
        recorder(OpType.GET, "b", 2)

        assert len(snapshot) == 1
        assert len(recorder) == 2

    def test_of_type_filters(self, profile) -> None:
        recorder = ChangeRecorder()
        tracked = create_tracker(profile, recorder)
        tracked["name"]
        tracked["name"] = "Sana"
        tracked["hobbies"].sort()

        assert [e.key for e in recorder.of_type(OpType.SET)] == ["name"]
        assert [e.key for e in recorder.of_type(OpType.SORT)] == ["sort"]
        assert recorder.of_type(OpType.DELETE) == ()

    def test_clear(self) -> None:
        recorder = ChangeRecorder()
        recorder(OpType.SET, "a", 1, None)
        recorder.clear()
        assert recorder.events == ()
        assert len(recorder) == 0

    def test_event_is_frozen(self) -> None:
        event = ChangeEvent(OpType.SET, "a", 1, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.key = "b"  # type: ignore[misc]
