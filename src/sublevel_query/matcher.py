"""Evaluation of parsed conditions against a layout."""

from __future__ import annotations

from sublevel_query.layout import Layout
from sublevel_query.models import Condition, CountEntity, CountRoomType, Ordering, RoomType


def count_entities(layout: Layout, name: str) -> int:
    wanted = name.casefold()
    return sum(1 for entity in layout.spawn_objects() if entity.name.casefold() == wanted)


def count_room_type(layout: Layout, room_type: RoomType) -> int:
    return sum(1 for unit in layout.map_units() if unit.room_type == room_type)


def matches(condition: Condition, layout: Layout) -> bool:
    """Return whether ``layout`` satisfies ``condition``. Never mutates either argument."""
    if isinstance(condition, CountEntity):
        observed = count_entities(layout, condition.name)
    elif isinstance(condition, CountRoomType):
        observed = count_room_type(layout, condition.room_type)
    else:
        raise TypeError(f"Unsupported condition type: {type(condition).__name__}")
    return Ordering.compare(observed, condition.amount) is condition.relationship
