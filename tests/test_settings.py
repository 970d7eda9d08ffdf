"""Tests for scope-aware settings."""

import logging

import pytest
import yaml
from dashboard_mentions.exceptions import SettingsError
from dashboard_mentions.settings import AppSettings
from dashboard_mentions.settings import MentionSettings
from dashboard_mentions.settings import SettingsPaths
from dashboard_mentions.settings import deep_merge


def _write(path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data), encoding="utf-8")


class TestSettingsPaths:
    def test_default_layout(self, isolated_settings) -> None:
        home, project = isolated_settings
        paths = SettingsPaths.default()
        assert paths.global_settings == home / ".dashboard" / "settings.yaml"
        assert paths.project_settings == project / ".dashboard" / "settings.yaml"
        assert paths.local_settings == project / ".dashboard" / "settings.local.yaml"


class TestMentionSettings:
    def test_defaults(self) -> None:
        settings = AppSettings().get_mention_settings()
        assert settings == MentionSettings()
        assert settings.max_suggestions == 5
        assert settings.enable_priority is True
        assert settings.catalog_path is None

    def test_scopes_merge_most_specific_wins(self, isolated_settings, monkeypatch) -> None:
        """global < project < local."""
        home, project = isolated_settings
        monkeypatch.setenv("HOME", str(home))
        _write(home / ".dashboard" / "settings.yaml", {"mentions": {"max_suggestions": 3, "catalog": "~/cat.yaml"}})
        _write(project / ".dashboard" / "settings.yaml", {"mentions": {"max_suggestions": 8}})
        _write(project / ".dashboard" / "settings.local.yaml", {"mentions": {"enable_priority": False}})

        settings = AppSettings().get_mention_settings()
        assert settings.max_suggestions == 8
        assert settings.enable_priority is False
        assert settings.catalog_path == home / "cat.yaml"

    @pytest.mark.parametrize(
        "section",
        [
            {"max_suggestions": "five"},
            {"max_suggestions": -1},
            {"max_suggestions": True},
            {"enable_priority": "yes"},
        ],
    )
    def test_bad_values(self, section) -> None:
        with pytest.raises(SettingsError):
            MentionSettings.from_dict(section)

    def test_section_must_be_mapping(self, isolated_settings) -> None:
        home, _ = isolated_settings
        _write(home / ".dashboard" / "settings.yaml", {"mentions": ["nope"]})
        with pytest.raises(SettingsError):
            AppSettings().get_mention_settings()

    def test_unreadable_file_is_skipped(self, isolated_settings, caplog) -> None:
        """Broken YAML logs a warning and the other scopes still apply."""
        home, project = isolated_settings
        _write(home / ".dashboard" / "settings.yaml", {"mentions": {"max_suggestions": 2}})
        broken = project / ".dashboard" / "settings.yaml"
        broken.parent.mkdir(parents=True)
        broken.write_text("mentions: [unclosed", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="dashboard_mentions.settings"):
            settings = AppSettings().get_mention_settings()

        assert settings.max_suggestions == 2
        assert "Skipping unreadable settings file" in caplog.text


class TestSetMentionSetting:
    def test_writes_scope_file(self, isolated_settings) -> None:
        home, project = isolated_settings
        app_settings = AppSettings()
        app_settings.set_mention_setting("max_suggestions", 7, scope="project")

        data = yaml.safe_load((project / ".dashboard" / "settings.yaml").read_text(encoding="utf-8"))
        assert data == {"mentions": {"max_suggestions": 7}}
        assert app_settings.get_mention_settings().max_suggestions == 7

    def test_keeps_other_keys(self, isolated_settings) -> None:
        home, _ = isolated_settings
        path = home / ".dashboard" / "settings.yaml"
        _write(path, {"theme": "dark", "mentions": {"enable_priority": False}})

        AppSettings().set_mention_setting("max_suggestions", 1)

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data == {"theme": "dark", "mentions": {"enable_priority": False, "max_suggestions": 1}}

    def test_rejects_unknown_key(self) -> None:
        with pytest.raises(SettingsError, match="Unknown mentions setting"):
            AppSettings().set_mention_setting("colour", "red")

    def test_rejects_bad_value(self, isolated_settings) -> None:
        """Values are type-checked before anything is written."""
        home, _ = isolated_settings
        with pytest.raises(SettingsError):
            AppSettings().set_mention_setting("max_suggestions", "lots")
        assert not (home / ".dashboard" / "settings.yaml").exists()

    def test_list_scope_file(self, isolated_settings) -> None:
        """A scope file that isn't a mapping is a settings error."""
        home, _ = isolated_settings
        _write(home / ".dashboard" / "settings.yaml", ["not", "a", "mapping"])
        with pytest.raises(SettingsError, match="mapping"):
            AppSettings().set_mention_setting("max_suggestions", 3)

    def test_invalid_yaml_scope_file(self, isolated_settings) -> None:
        home, _ = isolated_settings
        path = home / ".dashboard" / "settings.yaml"
        path.parent.mkdir(parents=True)
        path.write_text("mentions: [unclosed", encoding="utf-8")
        with pytest.raises(SettingsError, match="Could not read settings file"):
            AppSettings().set_mention_setting("max_suggestions", 3)


def test_deep_merge() -> None:
    base = {"mentions": {"a": 1, "b": 2}, "x": 1}
    overlay = {"mentions": {"b": 3}, "y": 2}
    assert deep_merge(base, overlay) == {"mentions": {"a": 1, "b": 3}, "x": 1, "y": 2}
    assert base == {"mentions": {"a": 1, "b": 2}, "x": 1}
