"""Read-only layout surface consumed by the matcher, plus JSON-backed snapshots."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Protocol

from sublevel_query.errors import LayoutFormatError
from sublevel_query.models import RoomType


class SpawnObject(Protocol):
    """Anything placed in a layout that can be identified by name."""

    @property
    def name(self) -> str: ...


class MapUnit(Protocol):
    """A structural piece of a layout with a room classification."""

    @property
    def room_type(self) -> RoomType: ...


class Layout(Protocol):
    """Generated sublevel as seen by condition matching."""

    def spawn_objects(self) -> Iterable[SpawnObject]:
        """Return every spawned entity in the layout."""

    def map_units(self) -> Iterable[MapUnit]:
        """Return every placed map unit in the layout."""


@dataclass(frozen=True, slots=True)
class SpawnedEntity:
    name: str
    kind: str | None = None


@dataclass(frozen=True, slots=True)
class PlacedUnit:
    unit: str
    room_type: RoomType


@dataclass(frozen=True, slots=True)
class LayoutSnapshot:
    """Immutable in-memory layout, typically loaded from a generator's JSON export."""

    name: str
    entities: tuple[SpawnedEntity, ...] = field(default_factory=tuple)
    units: tuple[PlacedUnit, ...] = field(default_factory=tuple)

    def spawn_objects(self) -> Iterator[SpawnedEntity]:
        return iter(self.entities)

    def map_units(self) -> Iterator[PlacedUnit]:
        return iter(self.units)


def _list_field(payload: dict, key: str) -> list:
    items = payload.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise LayoutFormatError(f"{key} must be a list, got {type(items).__name__}")
    return items


def layout_from_dict(payload: Any, *, default_name: str = "layout") -> LayoutSnapshot:
    if not isinstance(payload, dict):
        raise LayoutFormatError(f"Layout payload must be a JSON object, got {type(payload).__name__}")

    entities: list[SpawnedEntity] = []
    for index, item in enumerate(_list_field(payload, "spawn_objects")):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise LayoutFormatError(f"spawn_objects[{index}] needs a string 'name'")
        entities.append(SpawnedEntity(name=item["name"], kind=item.get("kind")))

    units: list[PlacedUnit] = []
    for index, item in enumerate(_list_field(payload, "map_units")):
        if not isinstance(item, dict) or not isinstance(item.get("room_type"), str):
            raise LayoutFormatError(f"map_units[{index}] needs a string 'room_type'")
        room_type = RoomType.from_token(item["room_type"])
        if room_type is None:
            raise LayoutFormatError(f"map_units[{index}] has unknown room_type {item['room_type']!r}")
        units.append(PlacedUnit(unit=str(item.get("unit", f"unit_{index}")), room_type=room_type))

    return LayoutSnapshot(
        name=str(payload.get("name") or default_name),
        entities=tuple(entities),
        units=tuple(units),
    )


def load_layout(path: str | Path) -> LayoutSnapshot:
    target = Path(path)
    try:
        payload = json.loads(target.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LayoutFormatError(f"{target} is not a valid JSON snapshot: {exc}") from exc
    return layout_from_dict(payload, default_name=target.stem)


def iter_layouts(directory: str | Path, pattern: str = "*.json") -> Iterator[LayoutSnapshot]:
    """Yield snapshots for files under ``directory`` matching ``pattern``, sorted by path."""
    for path in sorted(Path(directory).glob(pattern)):
        if path.is_file():
            yield load_layout(path)
