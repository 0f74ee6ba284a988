"""Condition language for querying generated sublevel layouts."""

from .errors import (
    ConditionSyntaxError,
    InvalidArgumentError,
    LayoutFormatError,
    SearchConditionError,
    UnknownConditionKindError,
)
from .layout import Layout, LayoutSnapshot, PlacedUnit, SpawnedEntity, load_layout
from .matcher import matches
from .models import Condition, ConditionKind, CountEntity, CountRoomType, Ordering, RoomType, render
from .parser import ConditionParser, parse_condition
from .search import LayoutSearch, SearchResult

__all__ = [
    "Condition",
    "ConditionKind",
    "ConditionParser",
    "ConditionSyntaxError",
    "CountEntity",
    "CountRoomType",
    "InvalidArgumentError",
    "Layout",
    "LayoutFormatError",
    "LayoutSearch",
    "LayoutSnapshot",
    "Ordering",
    "PlacedUnit",
    "RoomType",
    "SearchConditionError",
    "SearchResult",
    "SpawnedEntity",
    "UnknownConditionKindError",
    "load_layout",
    "matches",
    "parse_condition",
    "render",
]
