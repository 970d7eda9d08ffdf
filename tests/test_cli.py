"""Tests for the dashboard-mentions CLI."""

import pytest
import yaml
from click.testing import CliRunner
from dashboard_mentions.catalog import load_catalog
from dashboard_mentions.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _highlighted_line(output: str) -> str:
    return next(line for line in output.splitlines() if line.lstrip().startswith(">"))


class TestDetect:
    def test_detects_jar(self, runner) -> None:
        result = runner.invoke(cli, ["detect", "buy milk @gro"])
        assert result.exit_code == 0
        assert "jar" in result.output
        assert "query='gro'" in result.output
        assert "start=9 end=13" in result.output

    def test_caret_option(self, runner) -> None:
        result = runner.invoke(cli, ["detect", "#ab cd", "--caret", "2"])
        assert "tag" in result.output
        assert "query='a'" in result.output

    def test_no_mention(self, runner) -> None:
        result = runner.invoke(cli, ["detect", "foo@bar"])
        assert result.exit_code == 0
        assert "No active mention" in result.output


class TestSuggest:
    def test_lists_catalog_matches(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["suggest", "buy @gro", "--catalog", str(catalog_file)])
        assert result.exit_code == 0
        assert "@groceries" in result.output
        assert "Weekly shopping" in result.output
        assert "Use this as a new jar" in result.output
        assert "@gro" in _highlighted_line(result.output)

    def test_down_moves_highlight(self, runner) -> None:
        result = runner.invoke(cli, ["suggest", "!", "--down", "3"])
        assert result.exit_code == 0
        assert "!high" in _highlighted_line(result.output)

    def test_no_suggestions(self, runner) -> None:
        """An empty tag query without a catalog has nothing to show."""
        result = runner.invoke(cli, ["suggest", "#"])
        assert "No suggestions" in result.output

    def test_no_priority_flag(self, runner) -> None:
        result = runner.invoke(cli, ["suggest", "!", "--no-priority"])
        assert "No suggestions" in result.output

    def test_settings_disable_priority(self, runner, isolated_settings) -> None:
        home, _ = isolated_settings
        settings_file = home / ".dashboard" / "settings.yaml"
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(yaml.dump({"mentions": {"enable_priority": False}}), encoding="utf-8")

        result = runner.invoke(cli, ["suggest", "!"])
        assert "No suggestions" in result.output

    def test_limit(self, runner, catalog_file) -> None:
        result = runner.invoke(cli, ["suggest", "@g", "--catalog", str(catalog_file), "--limit", "1"])
        assert "@groceries" in result.output
        assert "@growth" not in result.output

    def test_missing_catalog_fails(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["suggest", "@g", "--catalog", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_settings_fail(self, runner, isolated_settings) -> None:
        home, _ = isolated_settings
        settings_file = home / ".dashboard" / "settings.yaml"
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("mentions:\n  max_suggestions: lots\n", encoding="utf-8")

        result = runner.invoke(cli, ["suggest", "@g"])
        assert result.exit_code == 1
        assert "max_suggestions" in result.output


class TestParse:
    def test_prints_fields(self, runner) -> None:
        result = runner.invoke(cli, ["parse", "finish @work #urgent !h"])
        assert result.exit_code == 0
        assert "@work" in result.output
        assert "#urgent" in result.output
        assert "High" in result.output

    def test_multiple_fields_last_priority_wins(self, runner) -> None:
        result = runner.invoke(cli, ["parse", "title !low", "body !vh"])
        assert "Very high" in result.output

    def test_write_new_entities(self, runner, catalog_file) -> None:
        """--write saves jars and tags the catalog didn't have."""
        result = runner.invoke(cli, ["parse", "@work @side #urgent #later", "--catalog", str(catalog_file), "--write"])
        assert result.exit_code == 0
        assert "New:" in result.output
        assert "Saved" in result.output

        catalog = load_catalog(catalog_file)
        assert [item.name for item in catalog.jars] == ["groceries", "growth", "work", "side"]
        assert [item.name for item in catalog.tags] == ["urgent", "someday", "later"]

    def test_catalog_without_write_leaves_file(self, runner, catalog_file) -> None:
        before = catalog_file.read_text(encoding="utf-8")
        result = runner.invoke(cli, ["parse", "@brandnew", "--catalog", str(catalog_file)])
        assert "New:" in result.output
        assert catalog_file.read_text(encoding="utf-8") == before

    def test_write_without_catalog_fails(self, runner) -> None:
        """--write with no catalog file anywhere is an error, not a silent no-op."""
        result = runner.invoke(cli, ["parse", "@brandnew", "--write"])
        assert result.exit_code == 1
        assert "--write needs a catalog file" in result.output


def test_strip(runner) -> None:
    result = runner.invoke(cli, ["strip", "call mom !high today"])
    assert result.exit_code == 0
    assert result.output == "call mom today\n"


def test_todo(runner) -> None:
    result = runner.invoke(cli, ["todo", "call mom !high today", "with #family"])
    assert result.exit_code == 0
    assert "call mom today" in result.output
    assert "High" in result.output
    assert "#family" in result.output


def test_todo_default_priority(runner) -> None:
    result = runner.invoke(cli, ["todo", "water plants"])
    assert "Medium" in result.output


def test_version(runner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "dashboard-mentions" in result.output


class TestConfig:
    def test_sets_value_in_scope(self, runner, isolated_settings) -> None:
        """Values are parsed as YAML scalars and written to the chosen scope."""
        _, project = isolated_settings
        result = runner.invoke(cli, ["config", "enable_priority", "false", "--scope", "project"])
        assert result.exit_code == 0

        data = yaml.safe_load((project / ".dashboard" / "settings.yaml").read_text(encoding="utf-8"))
        assert data == {"mentions": {"enable_priority": False}}

        suggest = runner.invoke(cli, ["suggest", "!"])
        assert "No suggestions" in suggest.output

    def test_path_values_stay_strings(self, runner, isolated_settings) -> None:
        home, _ = isolated_settings
        runner.invoke(cli, ["config", "catalog", "~/catalog.yaml"])
        data = yaml.safe_load((home / ".dashboard" / "settings.yaml").read_text(encoding="utf-8"))
        assert data == {"mentions": {"catalog": "~/catalog.yaml"}}

    def test_bad_value_fails(self, runner) -> None:
        result = runner.invoke(cli, ["config", "max_suggestions", "lots"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_unknown_key_rejected(self, runner) -> None:
        result = runner.invoke(cli, ["config", "colour", "red"])
        assert result.exit_code != 0

    def test_broken_scope_file_fails(self, runner, isolated_settings) -> None:
        """An unusable settings file is reported, not a traceback."""
        home, _ = isolated_settings
        path = home / ".dashboard" / "settings.yaml"
        path.parent.mkdir(parents=True)
        path.write_text("- just\n- a list\n", encoding="utf-8")

        result = runner.invoke(cli, ["config", "max_suggestions", "3"])
        assert result.exit_code == 1
        assert "mapping" in result.output
