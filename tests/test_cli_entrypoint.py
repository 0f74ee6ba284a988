from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

pytest.importorskip("typer")

from typer.testing import CliRunner  # noqa: E402

runner = CliRunner()


def _app():
    return importlib.import_module("sublevel_query.main").app


def _write_layout(tmp_path: Path) -> Path:
    path = tmp_path / "SCx7.json"
    path.write_text(
        json.dumps(
            {
                "name": "SCx7",
                "spawn_objects": [{"name": "Bulborb"}] * 3,
                "map_units": [{"unit": "way4", "room_type": "hall"}] * 2,
            }
        ),
        encoding="utf-8",
    )
    return path


def test_console_entrypoint_exposes_app() -> None:
    module = importlib.import_module("sublevel_query.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_parse_prints_canonical_form() -> None:
    result = runner.invoke(_app(), ["parse", "count_unit alcove > 1"])

    assert result.exit_code == 0
    assert "count_unit cap > 1" in result.output


def test_parse_rejects_unknown_keyword() -> None:
    result = runner.invoke(_app(), ["parse", "frobnicate foo = 1"])

    assert result.exit_code == 2


def test_check_reports_match(tmp_path: Path) -> None:
    layout = _write_layout(tmp_path)

    result = runner.invoke(_app(), ["check", "count bulborb > 2", "count_unit hall = 2", "--layout", str(layout)])

    assert result.exit_code == 0
    assert "'matches': True" in result.output


def test_check_exits_nonzero_without_match(tmp_path: Path) -> None:
    layout = _write_layout(tmp_path)

    result = runner.invoke(_app(), ["check", "count_unit room > 5", "--layout", str(layout)])

    assert result.exit_code == 1
    assert "'matches': False" in result.output


def test_search_scans_directory(tmp_path: Path) -> None:
    _write_layout(tmp_path)

    result = runner.invoke(_app(), ["search", "count bulborb = 3", "--layouts-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "SCx7" in result.output


def test_check_rejects_undecodable_layout(tmp_path: Path) -> None:
    layout = tmp_path / "bad.json"
    layout.write_bytes(b"\xff\xfe{")

    result = runner.invoke(_app(), ["check", "count foo = 0", "--layout", str(layout)])

    assert result.exit_code == 2


def test_unknown_log_level_is_rejected() -> None:
    result = runner.invoke(_app(), ["--log-level", "chatty", "parse", "count foo = 1"])

    assert result.exit_code == 2
