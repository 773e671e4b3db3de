"""Serializers for the persisted event list.

The list is stored as a compact JSON array under a single key. Decoding is
strict: anything that is not a list of well-formed records is reported as a
DeserializationError and the caller decides how to recover.
"""

import io

from django.core.validators import ProhibitNullCharactersValidator
from rest_framework import serializers
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.renderers import JSONRenderer

from events.domain import Category, DeserializationError, Event, EventId


class EventIdField(serializers.Field):
    """Maps EventId to and from its integer form."""

    default_error_messages = {
        "invalid": "A valid integer event id is required.",
    }

    def to_representation(self, value: EventId) -> int:
        return value.value

    def to_internal_value(self, data) -> EventId:
        if isinstance(data, bool):
            self.fail("invalid")
        if isinstance(data, float) and not data.is_integer():
            self.fail("invalid")
        try:
            return EventId(value=int(data))
        except (TypeError, ValueError, OverflowError):
            self.fail("invalid")


class StoredTextField(serializers.CharField):
    """Text stored verbatim: blanks, surrounding whitespace and NUL included.

    Anything add() accepts must load back, so the NUL check CharField
    installs is dropped.
    """

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("allow_blank", True)
        kwargs.setdefault("trim_whitespace", False)
        super().__init__(**kwargs)
        self.validators = [
            validator
            for validator in self.validators
            if not isinstance(validator, ProhibitNullCharactersValidator)
        ]


class EventRecordSerializer(serializers.Serializer):
    """Serializer for the stored form of an Event."""

    id = EventIdField()
    title = StoredTextField()
    date = StoredTextField()
    category = StoredTextField(required=False, default=Category.UNCATEGORIZED.value)
    description = StoredTextField(required=False, default="")

    def create(self, validated_data) -> Event:
        return Event(**validated_data)


def encode_events(events) -> str:
    """Render events as the JSON array written to storage."""
    data = EventRecordSerializer(list(events), many=True).data
    return JSONRenderer().render(data).decode("utf-8")


def decode_events(raw: str) -> list[Event]:
    """Parse the stored JSON array back into events.

    Raises:
        DeserializationError: If the content is not valid JSON, is not a
            list of records, or holds duplicate ids.
    """
    try:
        data = JSONParser().parse(io.BytesIO(raw.encode("utf-8")))
    except ParseError as exc:
        raise DeserializationError(reason=str(exc.detail)) from exc

    serializer = EventRecordSerializer(data=data, many=True)
    if not serializer.is_valid():
        raise DeserializationError(reason=str(serializer.errors))
    events = serializer.save()

    seen: set[EventId] = set()
    for event in events:
        if event.id in seen:
            raise DeserializationError(reason=f"duplicate event id {event.id}")
        seen.add(event.id)
    return events
