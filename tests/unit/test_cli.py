"""Unit tests for the flatpack CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from flatpack import __version__
from flatpack.cli.main import app

runner = CliRunner()


class TestGenerateDryRun:
    """Tests for layout-only generation."""

    def test_default_cabinet(self) -> None:
        result = runner.invoke(app, ["generate", "--dry-run"])
        assert result.exit_code == 0
        assert "CABINET LAYOUT" in result.output
        assert "HOLES PER SIDE: 14" in result.output

    def test_dimension_options(self) -> None:
        result = runner.invoke(
            app,
            ["generate", "--dry-run", "--format", "json", "--shelves", "0", "--width", "800"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["cabinet"]["width"] == 800.0
        assert len(data["holes"]["sites"]) == 8

    def test_exploded_flag(self) -> None:
        result = runner.invoke(
            app, ["generate", "--dry-run", "--exploded", "--format", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["explode"] == 80.0

    def test_config_file(self, tmp_path: Path) -> None:
        path = tmp_path / "cabinet.json"
        path.write_text(
            json.dumps({"cabinet": {"shelf_count": 1}, "render": {"exploded": True}}),
            encoding="utf-8",
        )
        result = runner.invoke(
            app, ["generate", "--config", str(path), "--dry-run", "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["cabinet"]["shelf_count"] == 1
        assert data["explode"] == 80.0

    def test_assembled_overrides_config(self, tmp_path: Path) -> None:
        path = tmp_path / "cabinet.json"
        path.write_text(json.dumps({"render": {"exploded": True}}), encoding="utf-8")
        result = runner.invoke(
            app,
            ["generate", "-c", str(path), "--assembled", "--dry-run", "--format", "json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["explode"] == 0.0


class TestGenerateErrors:
    """Tests for invalid input handling."""

    def test_degenerate_height(self) -> None:
        result = runner.invoke(app, ["generate", "--dry-run", "--height", "100"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_narrow_cabinet_rejected_by_domain(self) -> None:
        result = runner.invoke(app, ["generate", "--dry-run", "--width", "30"])
        assert result.exit_code == 1
        assert "width must exceed" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", "--config", str(tmp_path / "nope.json"), "--dry-run"]
        )
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["generate", "--dry-run", "--format", "stl"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output
