"""Text parser for layout search conditions.

A condition is a keyword followed by a target, a comparator and an amount::

    count bulborb > 2
    count_unit hall = 2

Whitespace between the target, comparator and amount is optional. Only spaces
and tabs may follow the amount.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from sublevel_query.errors import ConditionSyntaxError, InvalidArgumentError, UnknownConditionKindError
from sublevel_query.models import Condition, ConditionKind, CountEntity, CountRoomType, Ordering, RoomType

_logger = logging.getLogger("sublevel_query.parser")


class ConditionParser:
    _KEYWORD_PATTERN = re.compile(r"[ \t]*([A-Za-z_-]+)[ \t]+")
    _BODY_PATTERN = re.compile(r"([A-Za-z0-9_-]+)[ \t]*([<=>])[ \t]*([0-9]+)")

    def __init__(self) -> None:
        self._builders: dict[ConditionKind, Callable[[str, Ordering, int], Condition]] = {
            ConditionKind.COUNT: self._build_count_entity,
            ConditionKind.COUNT_UNIT: self._build_count_room_type,
        }

    def parse(self, text: str) -> Condition:
        keyword_match = self._KEYWORD_PATTERN.match(text)
        if not keyword_match:
            raise ConditionSyntaxError(text, "expected a condition keyword followed by whitespace")

        keyword = keyword_match.group(1)
        try:
            kind = ConditionKind(keyword.lower())
        except ValueError:
            raise UnknownConditionKindError(keyword) from None

        body = text[keyword_match.end():]
        body_match = self._BODY_PATTERN.match(body)
        if not body_match:
            raise ConditionSyntaxError(text, f"expected '<target> <comparator> <amount>' after {keyword!r}")
        if body[body_match.end():].strip(" \t"):
            raise ConditionSyntaxError(text, "unexpected trailing input")

        target, symbol, digits = body_match.groups()
        condition = self._builders[kind](target, Ordering(symbol), int(digits))
        _logger.debug("condition_parsed", extra={"text": text, "condition": str(condition)})
        return condition

    @staticmethod
    def _build_count_entity(target: str, relationship: Ordering, amount: int) -> Condition:
        return CountEntity(name=target.strip(), relationship=relationship, amount=amount)

    @staticmethod
    def _build_count_room_type(target: str, relationship: Ordering, amount: int) -> Condition:
        room_type = RoomType.from_token(target)
        if room_type is None:
            raise InvalidArgumentError(target)
        return CountRoomType(room_type=room_type, relationship=relationship, amount=amount)


_default_parser = ConditionParser()


def parse_condition(text: str) -> Condition:
    """Parse ``text`` into a condition or raise a ``SearchConditionError`` subclass."""
    return _default_parser.parse(text)
