"""Tests for decoded message records."""

import pytest

from pycgate import (
    Event,
    GenericEvent,
    GenericResponse,
    LevelChangeEvent,
    LevelResponse,
    MessageType,
    NetworkAddress,
    OkResponse,
    Response,
    SecurityEvent,
    parse_line,
)


class TestMessageVariants:
    """Tests for the closed set of record types."""

    def test_processed_flags(self):
        assert SecurityEvent.processed is True
        assert LevelChangeEvent.processed is True
        assert GenericEvent.processed is False
        assert OkResponse.processed is True
        assert LevelResponse.processed is True
        assert GenericResponse.processed is False

    def test_types(self):
        assert issubclass(SecurityEvent, Event)
        assert issubclass(LevelResponse, Response)
        assert GenericEvent.type is MessageType.EVENT
        assert GenericResponse.type is MessageType.RESPONSE
        assert MessageType.EVENT == "event"


class TestRecords:
    """Tests for record construction and immutability."""

    def test_event_defaults(self):
        event = GenericEvent(raw="x", time="20170206-134427", code=700)
        assert event.net_id is None
        assert event.id is None
        assert event.system is False
        assert event.remainder == ()
        assert event.fields == {}
        assert event.level is None

    def test_event_is_frozen(self, level_change_line):
        event = parse_line(level_change_line)
        with pytest.raises(AttributeError):
            event.level = 0

    def test_fields_copied(self):
        fields = {"ramptime": 10}
        event = LevelChangeEvent(raw="x", time="20170206-134427", code=730, level=0, fields=fields)
        fields["ramptime"] = 20
        assert event.fields["ramptime"] == 10

    def test_response_equality(self):
        line = "[456] 300 //SHAC/254/56/3: level=129"
        assert parse_line(line) == LevelResponse(
            raw=line,
            command_id=456,
            code=300,
            net_id=NetworkAddress("SHAC", (254, 56, 3)),
            level=51,
        )

    def test_fresh_record_per_call(self, level_change_line):
        first = parse_line(level_change_line)
        second = parse_line(level_change_line)
        assert first == second
        assert first is not second
