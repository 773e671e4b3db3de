"""Unit tests for domain primitives and errors.

Run with: pytest tests/test_domain.py -v
"""

from datetime import date

import pytest

from events.domain import (
    DeserializationError,
    ErrorCode,
    Event,
    EventId,
    EventNotFoundError,
    InvalidEventIdError,
    SortOrder,
    ValidationError,
    parse_event_date,
)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_integer(self):
        """EventId.from_string parses a decimal id."""
        assert EventId.from_string("1712345678901") == EventId(value=1712345678901)

    def test_from_string_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert EventId.from_string(" 42 ").value == 42

    def test_from_string_invalid(self):
        """EventId.from_string raises ValueError for non-numeric input."""
        with pytest.raises(ValueError):
            EventId.from_string("not-an-id")

    def test_str_is_bare_value(self):
        assert str(EventId(value=7)) == "7"


class TestSortOrder:
    """Tests for SortOrder parsing."""

    def test_ascending(self):
        assert SortOrder.from_string("date-asc") is SortOrder.ASCENDING

    def test_descending(self):
        assert SortOrder.from_string("date-desc") is SortOrder.DESCENDING

    @pytest.mark.parametrize("value", [None, "", "title", "DATE-ASC"])
    def test_anything_else_defaults_to_descending(self, value):
        """Unknown selections fall back to latest-first."""
        assert SortOrder.from_string(value) is SortOrder.DESCENDING


class TestParseEventDate:
    """Tests for calendar date parsing."""

    def test_iso_date(self):
        assert parse_event_date("2026-04-10") == date(2026, 4, 10)

    def test_iso_datetime_uses_date_part(self):
        assert parse_event_date("2026-04-10T18:30:00") == date(2026, 4, 10)

    @pytest.mark.parametrize("value", [None, "", "   ", "tomorrow", "2026-13-40", "10/04/2026"])
    def test_unparsable_returns_none(self, value):
        assert parse_event_date(value) is None


class TestEvent:
    """Tests for the Event record."""

    def test_defaults(self):
        """Category and description are optional."""
        event = Event(id=EventId(value=1), title="Standup", date="2026-01-05")
        assert event.category == "uncategorized"
        assert event.description == ""


class TestDomainErrors:
    """Tests for domain error codes and messages."""

    def test_validation_error(self):
        err = ValidationError(missing_fields=("title",))
        assert err.code is ErrorCode.MISSING_REQUIRED_FIELD
        assert err.missing_fields == ("title",)
        assert str(err) == "MISSING_REQUIRED_FIELD: Please fill required fields!"

    def test_event_not_found_error(self):
        err = EventNotFoundError(EventId(value=9))
        assert err.code is ErrorCode.EVENT_NOT_FOUND
        assert err.event_id == EventId(value=9)

    def test_invalid_event_id_error(self):
        assert str(InvalidEventIdError()) == "INVALID_EVENT_ID: Invalid event ID format"

    def test_deserialization_error_keeps_reason(self):
        err = DeserializationError(reason="bad json")
        assert err.code is ErrorCode.CORRUPT_STORAGE
        assert err.reason == "bad json"
        assert "bad json" not in str(err)
