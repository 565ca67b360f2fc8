"""
CTF security agents.

These agents have no acknowledgement fallback: when the model output is
unusable the call fails with ``AgentBackendError``.
"""

from typing import Tuple

from agents_hub.agents.base import PromptAgent
from agents_hub.agents.parsing import split_first_token
from agents_hub.agents.schemas import (
    FlagInput,
    FlagOutput,
    LearnInput,
    LearnOutput,
    ReconInput,
    ReconOutput,
    VulnInput,
    VulnOutput,
)


class ReconAgent(PromptAgent):
    agent_id = "recon"
    display_name = "Reconnaissance Agent"
    prompt_name = "agents.recon"
    input_model = ReconInput
    output_model = ReconOutput

    def render(self, output: ReconOutput) -> Tuple[str, str]:
        return "Scan summarised", output.summary


class VulnAgent(PromptAgent):
    agent_id = "vuln"
    display_name = "Vulnerability Assessment Agent"
    prompt_name = "agents.vuln"
    input_model = VulnInput
    output_model = VulnOutput

    def render(self, output: VulnOutput) -> Tuple[str, str]:
        items = sorted(
            output.prioritized_vulnerabilities,
            key=lambda v: v.risk_score,
            reverse=True,
        )
        if not items:
            return "No vulnerabilities identified", "No vulnerabilities were identified in the provided data."

        lines = [
            f"{rank}. **{item.vulnerability}** (risk {item.risk_score:.1f}/10) - {item.explanation}"
            for rank, item in enumerate(items, start=1)
        ]
        return f"{len(items)} vulnerabilities prioritised", "\n".join(lines)


class FlagAgent(PromptAgent):
    agent_id = "flag"
    display_name = "Flag Recognition Agent"
    prompt_name = "agents.flag"
    input_model = FlagInput
    output_model = FlagOutput

    def render(self, output: FlagOutput) -> Tuple[str, str]:
        verdict = "Looks like a valid flag format" if output.is_valid_flag_format else "Does not match a known flag format"
        body = f"{verdict}.\n\nConfidence: **{output.confidence_score:.0%}**"
        return verdict, body


class LearnAgent(PromptAgent):
    """Input is ``<vulnerability_type> [challenge logs...]``."""

    agent_id = "learn"
    display_name = "Learning Agent"
    prompt_name = "agents.learn"
    input_model = LearnInput
    output_model = LearnOutput

    def parse_task(self, task):
        vulnerability_type, logs = split_first_token(task)
        return {"vulnerability_type": vulnerability_type, "challenge_logs": logs}

    def prompt_context(self, data: LearnInput):
        context = super().prompt_context(data)
        context["challenge_logs_section"] = (
            f"```\n{data.challenge_logs}\n```" if data.challenge_logs else "No challenge logs provided."
        )
        return context

    def render(self, output: LearnOutput) -> Tuple[str, str]:
        body = (
            f"**Recommended techniques**\n\n{output.recommended_techniques}\n\n"
            f"**Rationale**\n\n{output.rationale}"
        )
        return "Techniques recommended", body


__all__ = ["ReconAgent", "VulnAgent", "FlagAgent", "LearnAgent"]
