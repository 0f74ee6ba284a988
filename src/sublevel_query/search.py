"""Batch evaluation of conditions over many layouts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sublevel_query.layout import LayoutSnapshot
from sublevel_query.matcher import matches
from sublevel_query.models import Condition


@dataclass(slots=True)
class SearchResult:
    """Outcome of checking every condition against one layout."""

    layout_name: str
    matched: bool
    outcomes: dict[str, bool] = field(default_factory=dict)


class LayoutSearch:
    """Finds layouts for which every condition holds."""

    def __init__(self, conditions: Sequence[Condition], *, logger: logging.Logger | None = None) -> None:
        if not conditions:
            raise ValueError("At least one condition is required")
        self._conditions = tuple(conditions)
        self._logger = logger or logging.getLogger("sublevel_query.search")

    @property
    def conditions(self) -> tuple[Condition, ...]:
        return self._conditions

    def evaluate(self, layout: LayoutSnapshot) -> SearchResult:
        outcomes = {str(condition): matches(condition, layout) for condition in self._conditions}
        return SearchResult(layout_name=layout.name, matched=all(outcomes.values()), outcomes=outcomes)

    def run(self, layouts: Iterable[LayoutSnapshot], *, limit: int | None = None) -> list[SearchResult]:
        """Return results for matching layouts, stopping once ``limit`` matches are found."""
        self._logger.info(
            "search_started",
            extra={"conditions": [str(c) for c in self._conditions], "limit": limit},
        )
        hits: list[SearchResult] = []
        scanned = 0
        for layout in layouts:
            if limit is not None and len(hits) >= limit:
                break
            scanned += 1
            result = self.evaluate(layout)
            if result.matched:
                hits.append(result)
                self._logger.info("layout_matched", extra={"layout": layout.name})

        self._logger.info("search_finished", extra={"scanned": scanned, "matched": len(hits)})
        return hits
