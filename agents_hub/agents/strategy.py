"""Coordinating agents: Technical Director and the general assistant."""

from typing import Tuple

from agents_hub.agents.base import PromptAgent
from agents_hub.agents.schemas import (
    AnswerOutput,
    DirectorInput,
    DirectorOutput,
    QuestionInput,
)


class DirectorAgent(PromptAgent):
    """Breaks objectives into subtasks and recommends agents for each.

    ``roster`` is the markdown list of available agents shown to the model
    so it only delegates to tags that exist.
    """

    agent_id = "director"
    display_name = "Technical Director"
    prompt_name = "agents.director"
    input_model = DirectorInput
    output_model = DirectorOutput

    def __init__(self, llm, *, roster: str = "", **kwargs):
        super().__init__(llm, **kwargs)
        self.roster = roster

    def prompt_context(self, data):
        context = super().prompt_context(data)
        context["agent_roster"] = self.roster or "(no other agents available)"
        return context

    def render(self, output: DirectorOutput) -> Tuple[str, str]:
        return "Guidance provided", output.advice


class AssistantAgent(PromptAgent):
    agent_id = "assistant"
    display_name = "AI Assistant"
    prompt_name = "agents.assistant"
    input_model = QuestionInput
    output_model = AnswerOutput

    def render(self, output: AnswerOutput) -> Tuple[str, str]:
        return "Answered", output.answer


__all__ = ["DirectorAgent", "AssistantAgent"]
