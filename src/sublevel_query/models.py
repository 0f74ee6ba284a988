"""Condition model for layout search predicates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Ordering(str, Enum):
    """Relationship between an observed count and a target amount."""

    LESS = "<"
    EQUAL = "="
    GREATER = ">"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def compare(cls, left: int, right: int) -> Ordering:
        """Return how ``left`` orders relative to ``right``."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


class RoomType(str, Enum):
    """Room classification assigned to a placed map unit by the generator."""

    ROOM = "room"
    DEAD_END = "cap"
    HALLWAY = "hall"

    @property
    def token(self) -> str:
        """Canonical token accepted by the condition parser."""
        return self.value

    @classmethod
    def from_token(cls, token: str) -> RoomType | None:
        return _ROOM_TOKENS.get(token.strip().lower())


_ROOM_TOKENS: dict[str, RoomType] = {
    "room": RoomType.ROOM,
    "cap": RoomType.DEAD_END,
    "alcove": RoomType.DEAD_END,
    "hall": RoomType.HALLWAY,
    "hallway": RoomType.HALLWAY,
}


class ConditionKind(str, Enum):
    """Leading keyword of a condition, selecting the predicate variant."""

    COUNT = "count"
    COUNT_UNIT = "count_unit"


@dataclass(frozen=True, slots=True)
class CountEntity:
    """Number of spawned entities named ``name`` compared against ``amount``."""

    name: str
    relationship: Ordering
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")
        object.__setattr__(self, "name", self.name.strip())

    @property
    def kind(self) -> ConditionKind:
        return ConditionKind.COUNT

    def __str__(self) -> str:
        return f"{self.kind.value} {self.name} {self.relationship.symbol} {self.amount}"


@dataclass(frozen=True, slots=True)
class CountRoomType:
    """Number of map units classified as ``room_type`` compared against ``amount``."""

    room_type: RoomType
    relationship: Ordering
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")

    @property
    def kind(self) -> ConditionKind:
        return ConditionKind.COUNT_UNIT

    def __str__(self) -> str:
        return f"{self.kind.value} {self.room_type.token} {self.relationship.symbol} {self.amount}"


Condition = Union[CountEntity, CountRoomType]


def render(condition: Condition) -> str:
    """Return the canonical text form, which parses back to an equal condition."""
    return str(condition)
