"""Error types raised while parsing conditions and loading layouts."""

from __future__ import annotations


class SearchConditionError(ValueError):
    """Base error for condition text that cannot be turned into a condition."""


class ConditionSyntaxError(SearchConditionError):
    """Raised when condition text does not follow the condition grammar."""

    def __init__(self, text: str, reason: str = "malformed condition") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class InvalidArgumentError(SearchConditionError):
    """Raised when a token is well formed but outside its closed set of values."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Invalid argument {argument!r}")
        self.argument = argument


class UnknownConditionKindError(SearchConditionError):
    """Raised when the leading keyword names no known predicate."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f"Unrecognized search condition {keyword!r}")
        self.keyword = keyword


class LayoutFormatError(ValueError):
    """Raised when a layout snapshot payload is missing fields or has bad values."""
