"""Shared fixtures for dashboard-mentions tests."""

from pathlib import Path

import pytest
from dashboard_mentions.mentions.models import MentionItem
from dashboard_mentions.mentions.navigation import MentionNavigator


@pytest.fixture
def jars() -> list[MentionItem]:
    return [
        MentionItem(id="j1", name="groceries", description="Weekly shopping"),
        MentionItem(id="j2", name="growth"),
        MentionItem(id="j3", name="work", description="Day job"),
        MentionItem(id="j4", name="Gardening"),
    ]


@pytest.fixture
def tags() -> list[MentionItem]:
    return [
        MentionItem(id="t1", name="urgent"),
        MentionItem(id="t2", name="someday"),
        MentionItem(id="t3", name="urgent-ish"),
    ]


@pytest.fixture
def navigator(jars, tags) -> MentionNavigator:
    return MentionNavigator(jars=jars, tags=tags)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        """
jars:
  - name: groceries
    description: Weekly shopping
  - id: j-growth
    name: growth
  - name: work
tags:
  - name: urgent
  - name: someday
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch):
    """Keep tests away from the real ~/.dashboard settings."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.setattr(Path, "cwd", lambda: project)
    return home, project
