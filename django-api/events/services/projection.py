"""Derived, presentation-ready views of the event list.

Nothing here mutates the records it is given.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Self

from events.domain import ALL_CATEGORIES, Category, Event, SortOrder, parse_event_date


@dataclass(frozen=True)
class ViewQuery:
    """Current search, category filter and sort inputs."""

    query: str = ""
    category_filter: str = ALL_CATEGORIES
    sort_order: SortOrder = SortOrder.DESCENDING

    @classmethod
    def from_inputs(
        cls,
        search: str | None = None,
        category_filter: str | None = None,
        sort_order: str | None = None,
    ) -> Self:
        return cls(
            query=search or "",
            category_filter=category_filter or ALL_CATEGORIES,
            sort_order=SortOrder.from_string(sort_order),
        )


@dataclass(frozen=True)
class EventView:
    """Projected events plus the facts the list display needs."""

    events: tuple[Event, ...]
    total: int

    @property
    def is_store_empty(self) -> bool:
        return self.total == 0

    @property
    def has_no_matches(self) -> bool:
        return self.total > 0 and not self.events


def _date_key(event: Event) -> tuple[int, date]:
    # Unparsable dates sort as earlier than any real date.
    parsed = parse_event_date(event.date)
    if parsed is None:
        return (0, date.min)
    return (1, parsed)


def project(
    records: Sequence[Event],
    query: str = "",
    category_filter: str | Category = ALL_CATEGORIES,
    sort_order: str | SortOrder = SortOrder.DESCENDING,
) -> list[Event]:
    """Filter by category, search titles and sort by date.

    The sort is stable, so events with equal dates keep their relative
    order in both directions.
    """
    if isinstance(category_filter, Category):
        category_filter = category_filter.value
    if not isinstance(sort_order, SortOrder):
        sort_order = SortOrder.from_string(sort_order)

    selected = list(records)
    if category_filter != ALL_CATEGORIES:
        selected = [event for event in selected if event.category == category_filter]

    needle = (query or "").strip().casefold()
    if needle:
        selected = [event for event in selected if needle in event.title.casefold()]

    return sorted(
        selected,
        key=_date_key,
        reverse=sort_order is SortOrder.DESCENDING,
    )


def build_view(records: Sequence[Event], view_query: ViewQuery | None = None) -> EventView:
    view_query = view_query or ViewQuery()
    events = project(
        records,
        query=view_query.query,
        category_filter=view_query.category_filter,
        sort_order=view_query.sort_order,
    )
    return EventView(events=tuple(events), total=len(records))
