"""
Review agents that take structured input.

    @critic <item to review>
    Focus: <optional review focus>

    @education <content to enhance>
    Learning Goal: <required goal>
    Audience: <optional target audience>
"""

from typing import Tuple

from agents_hub.agents.base import PromptAgent
from agents_hub.agents.parsing import parse_structured_task
from agents_hub.agents.schemas import (
    CriticInput,
    CritiqueOutput,
    EducationInput,
    SuggestionsOutput,
)


class CriticAgent(PromptAgent):
    agent_id = "critic"
    display_name = "Critic Agent"
    prompt_name = "agents.critic"
    input_model = CriticInput
    output_model = CritiqueOutput
    has_fallback = True

    def parse_task(self, task):
        parsed = parse_structured_task(task, ["Focus"])
        return {"item_to_review": parsed.body, "review_focus": parsed.get("Focus") or None}

    def prompt_context(self, data: CriticInput):
        context = super().prompt_context(data)
        context["review_focus_section"] = (
            f"\n## Review Focus\n{data.review_focus}\n" if data.review_focus else ""
        )
        return context

    def fallback_output(self, data: CriticInput) -> CritiqueOutput:
        preview = data.item_to_review[:50]
        return CritiqueOutput(
            critique=f'Received critique task for: "{preview}...". The Critic Agent is analysing this.',
            status=self.fallback_status,
        )

    def render(self, output: CritiqueOutput) -> Tuple[str, str]:
        return output.status, output.critique


class EducationAgent(PromptAgent):
    agent_id = "education"
    display_name = "Education SME Agent"
    prompt_name = "agents.education"
    input_model = EducationInput
    output_model = SuggestionsOutput
    has_fallback = True

    def parse_task(self, task):
        parsed = parse_structured_task(task, ["Learning Goal", "Audience"])
        return {
            "context": parsed.body,
            "learning_goal": parsed.get("Learning Goal", ""),
            "target_audience": parsed.get("Audience") or None,
        }

    def prompt_context(self, data: EducationInput):
        context = super().prompt_context(data)
        context["target_audience_section"] = (
            f"\n## Target Audience\n{data.target_audience}\n" if data.target_audience else ""
        )
        return context

    def fallback_output(self, data: EducationInput) -> SuggestionsOutput:
        return SuggestionsOutput(
            suggestions=(
                f'Received education task regarding: "{data.learning_goal}". '
                "The Education SME Agent is reviewing the context."
            ),
            status=self.fallback_status,
        )

    def render(self, output: SuggestionsOutput) -> Tuple[str, str]:
        return output.status, output.suggestions


__all__ = ["CriticAgent", "EducationAgent"]
