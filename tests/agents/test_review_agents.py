"""Tests for the structured-input review agents."""

import pytest

from agents_hub.agents import CriticAgent, EducationAgent
from agents_hub.errors import TaskValidationError
from conftest import FakeLLMClient


class TestCriticAgent:
    @pytest.mark.asyncio
    async def test_focus_section_rendered(self, mock_logger):
        llm = FakeLLMClient('{"critique": "- unsanitised input", "status": "Review complete"}')
        agent = CriticAgent(llm, logger=mock_logger)

        reply = await agent.invoke("query = f'SELECT * FROM users WHERE id={uid}'\nFocus: SQL injection")

        assert "## Review Focus\nSQL injection" in llm.last_prompt
        assert "SELECT * FROM users" in llm.last_prompt
        assert reply.status == "Review complete"
        assert reply.body == "- unsanitised input"

    @pytest.mark.asyncio
    async def test_no_focus(self, mock_logger):
        llm = FakeLLMClient('{"critique": "fine", "status": "ok"}')

        await CriticAgent(llm, logger=mock_logger).invoke("print('hi')")

        assert "Review Focus" not in llm.last_prompt

    @pytest.mark.asyncio
    async def test_focus_without_item_rejected(self, mock_logger):
        llm = FakeLLMClient()

        with pytest.raises(TaskValidationError) as exc_info:
            await CriticAgent(llm, logger=mock_logger).invoke("Focus: security")

        assert exc_info.value.field == "item_to_review"
        assert llm.calls == 0

    @pytest.mark.asyncio
    async def test_fallback_previews_item(self, mock_logger):
        llm = FakeLLMClient("not json")
        item = "x" * 80

        reply = await CriticAgent(llm, logger=mock_logger).invoke(item)

        assert reply.acknowledged is True
        assert reply.status == "Task acknowledged"
        assert f'"{"x" * 50}..."' in reply.body

    @pytest.mark.asyncio
    async def test_inline_focus(self, mock_logger):
        llm = FakeLLMClient('{"critique": "c", "status": "ok"}')

        await CriticAgent(llm, logger=mock_logger).invoke("def login(): pass Focus: SQL injection")

        assert "## Review Focus\nSQL injection" in llm.last_prompt
        assert "def login(): pass\n" in llm.last_prompt


class TestEducationAgent:
    @pytest.mark.asyncio
    async def test_goal_and_audience(self, mock_logger):
        llm = FakeLLMClient('{"suggestions": "- start simple", "status": "Enhancements suggested"}')
        task = "SQLi tutorial using a complex payload\nLearning Goal: understand why injection works\nAudience: beginners"

        reply = await EducationAgent(llm, logger=mock_logger).invoke(task)

        prompt = llm.last_prompt
        assert "SQLi tutorial using a complex payload" in prompt
        assert "## Learning Goal\nunderstand why injection works" in prompt
        assert "## Target Audience\nbeginners" in prompt
        assert reply.body == "- start simple"

    @pytest.mark.asyncio
    async def test_missing_learning_goal(self, mock_logger):
        llm = FakeLLMClient()

        with pytest.raises(TaskValidationError) as exc_info:
            await EducationAgent(llm, logger=mock_logger).invoke("Some content")

        assert exc_info.value.field == "learning_goal"
        assert exc_info.value.message == "Missing learning goal."
        assert llm.calls == 0

    @pytest.mark.asyncio
    async def test_audience_optional(self, mock_logger):
        llm = FakeLLMClient('{"suggestions": "s", "status": "ok"}')

        await EducationAgent(llm, logger=mock_logger).invoke("content\nlearning goal: pivoting")

        assert "Target Audience" not in llm.last_prompt

    @pytest.mark.asyncio
    async def test_fallback_mentions_goal(self, mock_logger):
        llm = FakeLLMClient("")

        reply = await EducationAgent(llm, logger=mock_logger).invoke("content\nLearning Goal: pivoting")

        assert reply.acknowledged is True
        assert 'regarding: "pivoting"' in reply.body

    @pytest.mark.asyncio
    async def test_single_line_task(self, mock_logger):
        llm = FakeLLMClient('{"suggestions": "s", "status": "ok"}')
        task = "SQLi writeup Learning Goal: understand UNION attacks Audience: beginners"

        await EducationAgent(llm, logger=mock_logger).invoke(task)

        assert "## Learning Goal\nunderstand UNION attacks" in llm.last_prompt
        assert "## Target Audience\nbeginners" in llm.last_prompt
