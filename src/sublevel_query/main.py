"""CLI entrypoint for sublevel-query."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import print

from sublevel_query.config import settings
from sublevel_query.errors import LayoutFormatError, SearchConditionError
from sublevel_query.layout import iter_layouts, load_layout
from sublevel_query.models import Condition
from sublevel_query.parser import parse_condition
from sublevel_query.search import LayoutSearch

app = typer.Typer(help="Query generated sublevel layouts with count conditions")


@app.callback()
def _configure(log_level: str = typer.Option(None, help="Override SUBLEVEL_QUERY_LOG_LEVEL")) -> None:
    level = (log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(level=level)


def _parse_all(texts: list[str]) -> list[Condition]:
    conditions: list[Condition] = []
    for text in texts:
        try:
            conditions.append(parse_condition(text))
        except SearchConditionError as exc:
            raise typer.BadParameter(str(exc), param_hint="CONDITIONS") from exc
    return conditions


@app.command("show-config")
def show_config() -> None:
    """Show effective runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "layouts_dir": settings.layouts_dir,
            "layout_glob": settings.layout_glob,
            "search_limit": settings.search_limit,
        }
    )


@app.command("parse")
def parse(text: str) -> None:
    """Parse a condition and print its canonical form."""
    (condition,) = _parse_all([text])
    print({"kind": condition.kind.value, "canonical": str(condition)})


@app.command("check")
def check(
    conditions: list[str] = typer.Argument(..., help="Conditions, e.g. 'count bulborb > 2'"),
    layout: Path = typer.Option(..., help="Path to a JSON layout snapshot"),
) -> None:
    """Check whether a single layout satisfies every condition."""
    parsed = _parse_all(conditions)
    try:
        snapshot = load_layout(layout)
    except (OSError, LayoutFormatError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--layout") from exc

    result = LayoutSearch(parsed).evaluate(snapshot)
    print({"layout": result.layout_name, "matches": result.matched, "conditions": result.outcomes})
    if not result.matched:
        raise typer.Exit(code=1)


@app.command("search")
def search(
    conditions: list[str] = typer.Argument(..., help="Conditions that must all hold"),
    layouts_dir: Path = typer.Option(None, help="Directory of JSON layout snapshots"),
    pattern: str = typer.Option(None, help="Glob for snapshot files"),
    limit: int = typer.Option(None, min=1, help="Stop after this many matches"),
) -> None:
    """Scan a directory of layout snapshots for ones matching every condition."""
    parsed = _parse_all(conditions)
    directory = layouts_dir or Path(settings.layouts_dir)
    if not directory.is_dir():
        raise typer.BadParameter(f"Not a directory: {directory}", param_hint="--layouts-dir")

    try:
        hits = LayoutSearch(parsed).run(
            iter_layouts(directory, pattern or settings.layout_glob),
            limit=limit or settings.search_limit,
        )
    except (OSError, LayoutFormatError) as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=2)

    print({"matches": [hit.layout_name for hit in hits], "count": len(hits)})
    if not hits:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
