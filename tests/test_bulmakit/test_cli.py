"""Tests for the bulmakit CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from bulmakit import __version__
from bulmakit.cli.compose import _load_mapping
from bulmakit.cli.main import cli
from bulmakit.errors import ConfigError


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compose Bulma CSS class strings" in result.output

    def test_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "compose" in result.output
        assert "vocab" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "compose", "--display", "flex"])
        assert result.exit_code == 0
        assert "is-flex" in result.output


# ---------------------------------------------------------------------------
# compose command
# ---------------------------------------------------------------------------


class TestComposeCommand:
    def test_end_to_end(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "compose",
                "--text-color", "primary",
                "--display", "flex",
                "--viewport-display", "flex:desktop",
                "--helper", "relative",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            "has-text-primary is-flex is-flex-desktop is-relative"
        )

    def test_empty(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compose"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_json_output(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["compose", "--margin", "x:2", "--custom-class", "card", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == ["mx-2", "card"]

    def test_light_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--color", "primary", "--light"])
        assert result.exit_code == 0
        assert result.output.strip() == "is-primary is-light"

    def test_text_options(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "compose",
                "--text-size", "3",
                "--text-viewport-size", "5:mobile",
                "--text-decoration", "italic",
                "--text-weight", "semibold",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            "is-size-3 is-size-5-mobile is-italic has-text-weight-semibold"
        )

    def test_sorted(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["compose", "--margin", "y:1", "--margin", "x:2", "--sorted"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "mx-2 my-1"

    def test_insertion_order_by_default(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["compose", "--margin", "y:1", "--margin", "x:2"],
            env={"BULMAKIT_TOKEN_ORDER": None},
        )
        assert result.output.strip() == "my-1 mx-2"

    def test_sorted_from_env(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["compose", "--margin", "y:1", "--margin", "x:2"],
            env={"BULMAKIT_TOKEN_ORDER": "sorted"},
        )
        assert result.exit_code == 0
        assert result.output.strip() == "mx-2 my-1"

    def test_bad_env(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["compose"], env={"BULMAKIT_TOKEN_ORDER": "random"}
        )
        assert result.exit_code == 2
        assert "BULMAKIT_TOKEN_ORDER" in result.output

    def test_unknown_value(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--text-color", "purple"])
        assert result.exit_code == 2
        assert "Error:" in result.output
        assert "purple" in result.output

    def test_malformed_pair(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--margin", "x2"])
        assert result.exit_code == 2

    def test_unknown_helper(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--helper", "floating"])
        assert result.exit_code != 0


class TestComposeConfigFile:
    def test_config_file(self, tmp_path) -> None:
        path = tmp_path / "classes.json"
        path.write_text(json.dumps({"text_color": "danger", "margins": ["x:2"]}))
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--config", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "has-text-danger mx-2"

    def test_option_overrides_file(self, tmp_path) -> None:
        path = tmp_path / "classes.json"
        path.write_text(json.dumps({"text_color": "danger", "margins": ["x:2"]}))
        runner = CliRunner()
        result = runner.invoke(
            cli, ["compose", "--config", str(path), "--text-color", "info"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "has-text-info mx-2"

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "classes.json"
        path.write_text("{not json")
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--config", str(path)])
        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "classes.json"
        path.write_bytes(b'{"text_color": "\xff"}')
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--config", str(path)])
        assert result.exit_code == 2
        assert "not valid UTF-8" in result.output

    def test_unreadable_path(self, tmp_path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _load_mapping(tmp_path)
        assert "Cannot read" in str(exc_info.value)

    def test_not_an_object(self, tmp_path) -> None:
        path = tmp_path / "classes.json"
        path.write_text("[]")
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--config", str(path)])
        assert result.exit_code == 2

    def test_unknown_key(self, tmp_path) -> None:
        path = tmp_path / "classes.json"
        path.write_text(json.dumps({"colour": "primary"}))
        runner = CliRunner()
        result = runner.invoke(cli, ["compose", "--config", str(path)])
        assert result.exit_code == 2
        assert "colour" in result.output

    def test_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["compose", "--config", str(tmp_path / "missing.json")]
        )
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# vocab command
# ---------------------------------------------------------------------------


class TestVocabCommand:
    def test_lists_vocabularies(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["vocab"])
        assert result.exit_code == 0
        assert "text-color" in result.output
        assert "TextColor (19 members)" in result.output
        assert "column-size" in result.output

    def test_one_vocabulary(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["vocab", "viewport"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 9
        assert any(line.split() == ["full_hd", "fullhd"] for line in lines)

    def test_empty_fragment(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["vocab", "direction"])
        assert result.exit_code == 0
        assert "(empty)" in result.output

    def test_unknown_vocabulary(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["vocab", "nope"])
        assert result.exit_code == 2
        assert "unknown vocabulary" in result.output
