"""Tests for multi-field mention extraction and todo drafts."""

from dashboard_mentions.mentions.accumulator import MentionAccumulator
from dashboard_mentions.mentions.accumulator import build_todo_draft
from dashboard_mentions.mentions.accumulator import extract_mentions
from dashboard_mentions.mentions.models import PriorityCode


class TestMentionAccumulator:
    """Tests for MentionAccumulator."""

    def test_add_new_text(self) -> None:
        """A field with mentions is reported as contributing."""
        accumulator = MentionAccumulator()
        assert accumulator.add_text("@home #later") is True
        assert accumulator.is_seen("home")
        assert accumulator.is_seen("later")

    def test_duplicate_text_adds_nothing(self) -> None:
        """Seeing the same names again is not a change."""
        accumulator = MentionAccumulator()
        accumulator.add_text("@home")
        assert accumulator.add_text("again @home") is False
        assert accumulator.result().jars == ["home"]

    def test_skips_empty_fields(self) -> None:
        """None and empty strings are ignored."""
        accumulator = MentionAccumulator()
        assert accumulator.add_text(None) is False
        assert accumulator.add_text("") is False
        assert accumulator.result().empty

    def test_last_priority_wins(self) -> None:
        """Across fields, the last field with a priority wins."""
        accumulator = MentionAccumulator()
        accumulator.add_text("title !low")
        accumulator.add_text("body without priority")
        accumulator.add_text("notes !vh")
        assert accumulator.result().priority is PriorityCode.VERY_HIGH


class TestExtractMentions:
    def test_union_across_fields(self) -> None:
        """Title and body names are merged in first-seen order."""
        parsed = extract_mentions(["Plan @trip #travel", None, "Book @hotel for @trip #travel #money"])
        assert parsed.jars == ["trip", "hotel"]
        assert parsed.tags == ["travel", "money"]
        assert parsed.priority is None

    def test_no_fields(self) -> None:
        assert extract_mentions([]).empty


class TestBuildTodoDraft:
    def test_strips_priority_and_collects_names(self) -> None:
        """Priority tokens leave the title; names stay in it."""
        draft = build_todo_draft("finish @work #urgent !h")
        assert draft.title == "finish @work #urgent"
        assert draft.jars == ["work"]
        assert draft.tags == ["urgent"]
        assert draft.priority is PriorityCode.HIGH

    def test_default_priority_is_medium(self) -> None:
        draft = build_todo_draft("water plants")
        assert draft.priority is PriorityCode.MEDIUM
        assert draft.jars == []

    def test_extra_fields_contribute(self) -> None:
        """Extra fields add names and can set priority, but don't change the title."""
        draft = build_todo_draft("call mom", "about #family !l")
        assert draft.title == "call mom"
        assert draft.tags == ["family"]
        assert draft.priority is PriorityCode.LOW
