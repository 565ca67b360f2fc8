"""Tests for task text parsing."""

import pytest

from agents_hub.agents.parsing import parse_structured_task, split_first_token
from agents_hub.errors import TaskValidationError


class TestStructuredTask:
    def test_body_and_single_field(self):
        parsed = parse_structured_task("def login(): ...\nFocus: SQL injection", ["Focus"])

        assert parsed.body == "def login(): ..."
        assert parsed.get("Focus") == "SQL injection"

    def test_labels_are_case_insensitive(self):
        parsed = parse_structured_task("code\nfocus:   performance  ", ["Focus"])

        assert parsed.get("focus") == "performance"
        assert parsed.get("FOCUS") == "performance"

    def test_multiple_labels_split_at_next_label(self):
        task = (
            "SQL injection tutorial text\n"
            "spanning two lines\n"
            "Learning Goal: understand UNION-based injection\n"
            "Audience: beginners"
        )
        parsed = parse_structured_task(task, ["Learning Goal", "Audience"])

        assert parsed.body == "SQL injection tutorial text\nspanning two lines"
        assert parsed.get("Learning Goal") == "understand UNION-based injection"
        assert parsed.get("Audience") == "beginners"

    def test_multi_word_label_tolerates_extra_spaces(self):
        parsed = parse_structured_task("ctx\nlearning   goal: pivoting", ["Learning Goal"])

        assert parsed.get("Learning Goal") == "pivoting"

    def test_field_value_can_span_lines(self):
        parsed = parse_structured_task("ctx\nAudience: juniors\nwith some Linux", ["Audience"])

        assert parsed.get("Audience") == "juniors\nwith some Linux"

    def test_inline_label(self):
        parsed = parse_structured_task("def login(): pass Focus: SQL injection", ["Focus"])

        assert parsed.body == "def login(): pass"
        assert parsed.get("Focus") == "SQL injection"

    def test_inline_labels_on_one_line(self):
        task = "SQLi writeup Learning Goal: understand UNION attacks Audience: beginners"

        parsed = parse_structured_task(task, ["Learning Goal", "Audience"])

        assert parsed.body == "SQLi writeup"
        assert parsed.get("Learning Goal") == "understand UNION attacks"
        assert parsed.get("Audience") == "beginners"

    def test_label_inside_a_word_is_text(self):
        parsed = parse_structured_task("button:focus: outline; refocus: later", ["Focus"])

        assert parsed.body == "button:focus: outline; refocus: later"
        assert parsed.fields == {}

    def test_missing_label_returns_default(self):
        parsed = parse_structured_task("just a body", ["Focus"])

        assert parsed.body == "just a body"
        assert parsed.get("Focus") is None
        assert parsed.get("Focus", "") == ""

    def test_duplicate_label_rejected(self):
        with pytest.raises(TaskValidationError) as exc_info:
            parse_structured_task("x\nFocus: a\nFocus: b", ["Focus"])

        assert exc_info.value.field == "focus"

    def test_no_labels_configured(self):
        assert parse_structured_task("  body  ", []).body == "body"


class TestSplitFirstToken:
    def test_token_and_rest(self):
        assert split_first_token("sql_injection tried ' OR 1=1\nworked") == (
            "sql_injection",
            "tried ' OR 1=1\nworked",
        )

    def test_token_only(self):
        assert split_first_token("  xss  ") == ("xss", "")

    def test_empty(self):
        assert split_first_token("   ") == ("", "")
