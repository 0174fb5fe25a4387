"""Mini README: Tests for the Typer command line front end.

Runs both commands through ``CliRunner`` and decodes the printed JSON box.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from main_mbr_console import cli

runner = CliRunner()


def test_tokens_command_prints_box() -> None:
    result = runner.invoke(cli, ["tokens", "--point", "10 35", "--point", "20 40"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == pytest.approx([34.99999999, 9.99999999, 40.00000001, 20.00000001])


def test_tokens_command_accepts_polygons() -> None:
    result = runner.invoke(cli, ["tokens", "--polygon=-10 175 -10 -175 10 -175 10 175"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == pytest.approx([175, -10.03742305, -175, 10.03742305], abs=1e-6)


def test_tokens_command_reports_errors() -> None:
    result = runner.invoke(cli, ["tokens"])
    assert result.exit_code == 1
    assert "no geometry" in result.output


def test_umm_command_reads_bundle_and_granule(tmp_path) -> None:
    rectangle = {
        "WestBoundingCoordinate": 35,
        "SouthBoundingCoordinate": 0,
        "EastBoundingCoordinate": 40,
        "NorthBoundingCoordinate": 10,
    }
    bundle_path = tmp_path / "bundle.json"
    bundle_path.write_text(json.dumps({"BoundingRectangles": [rectangle]}), encoding="utf-8")
    granule_path = tmp_path / "granule.json"
    granule_path.write_text(
        json.dumps({"umm": {"SpatialExtent": {"HorizontalSpatialDomain": {"Geometry": {"BoundingRectangles": [rectangle]}}}}}),
        encoding="utf-8",
    )

    for path in (bundle_path, granule_path):
        result = runner.invoke(cli, ["umm", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [35, 0, 40, 10]


def test_umm_command_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(cli, ["umm", str(path)])
    assert result.exit_code == 1
    assert "not valid JSON" in result.output
