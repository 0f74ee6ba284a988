from __future__ import annotations

import dataclasses

import pytest

from sublevel_query.models import CountEntity, CountRoomType, Ordering, RoomType, render
from sublevel_query.parser import parse_condition


def test_render_count_entity() -> None:
    condition = CountEntity(name="bulborb", relationship=Ordering.GREATER, amount=2)

    assert render(condition) == "count bulborb > 2"


def test_render_count_room_type_uses_parser_keyword() -> None:
    condition = CountRoomType(room_type=RoomType.DEAD_END, relationship=Ordering.LESS, amount=3)

    assert str(condition) == "count_unit cap < 3"


@pytest.mark.parametrize(
    "text",
    [
        "count Bulborb = 3",
        "count_unit room > 5",
        "count_unit alcove = 0",
        "count_unit hallway < 2",
    ],
)
def test_rendered_form_parses_back_to_same_condition(text: str) -> None:
    condition = parse_condition(text)

    assert parse_condition(render(condition)) == condition


def test_conditions_are_immutable_and_hashable() -> None:
    condition = CountEntity(name="foo", relationship=Ordering.EQUAL, amount=1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        condition.amount = 2  # type: ignore[misc]
    assert len({condition, CountEntity(name="foo", relationship=Ordering.EQUAL, amount=1)}) == 1


def test_entity_name_is_stripped() -> None:
    assert CountEntity(name="  foo\t", relationship=Ordering.EQUAL, amount=0).name == "foo"


def test_negative_amount_is_rejected() -> None:
    with pytest.raises(ValueError):
        CountRoomType(room_type=RoomType.ROOM, relationship=Ordering.EQUAL, amount=-1)


def test_ordering_compare() -> None:
    assert Ordering.compare(1, 2) is Ordering.LESS
    assert Ordering.compare(2, 2) is Ordering.EQUAL
    assert Ordering.compare(3, 2) is Ordering.GREATER
    assert Ordering("<") is Ordering.LESS


def test_room_type_tokens() -> None:
    assert RoomType.from_token(" Hallway ") is RoomType.HALLWAY
    assert RoomType.from_token("corridor") is None
    assert [room.token for room in RoomType] == ["room", "cap", "hall"]
