"""Pydantic models for agent inputs and LLM outputs.

Input models strip whitespace and reject empty required fields, so a
missing field is caught before any LLM call. Output models ignore extra
keys the model may add around the requested JSON.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AgentInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)


class AgentOutput(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ═══════════════════════════════════════════════════════════════
# Inputs
# ═══════════════════════════════════════════════════════════════

class DirectorInput(AgentInput):
    query: str = Field(min_length=1, description="High-level objective or question")


class QuestionInput(AgentInput):
    question: str = Field(min_length=1)


class ReconInput(AgentInput):
    scan_results: str = Field(min_length=1, description="Raw scan output, e.g. from Nmap")


class VulnInput(AgentInput):
    vulnerability_data: str = Field(min_length=1)


class FlagInput(AgentInput):
    potential_flag: str = Field(min_length=1)


class LearnInput(AgentInput):
    vulnerability_type: str = Field(min_length=1, description="e.g. sql_injection")
    challenge_logs: str = ""


class TaskInput(AgentInput):
    task_description: str = Field(min_length=1)


class CriticInput(AgentInput):
    item_to_review: str = Field(min_length=1)
    review_focus: Optional[str] = None


class EducationInput(AgentInput):
    context: str = Field(min_length=1)
    learning_goal: str = Field(min_length=1)
    target_audience: Optional[str] = None


# ═══════════════════════════════════════════════════════════════
# Outputs
# ═══════════════════════════════════════════════════════════════

class DirectorOutput(AgentOutput):
    advice: str


class AnswerOutput(AgentOutput):
    answer: str


class ReconOutput(AgentOutput):
    summary: str


class PrioritizedVulnerability(AgentOutput):
    vulnerability: str
    risk_score: float = Field(ge=0.0, le=10.0)
    explanation: str


class VulnOutput(AgentOutput):
    prioritized_vulnerabilities: List[PrioritizedVulnerability]


class FlagOutput(AgentOutput):
    is_valid_flag_format: bool
    confidence_score: float = Field(ge=0.0, le=1.0)


class LearnOutput(AgentOutput):
    recommended_techniques: str
    rationale: str


class TaskOutput(AgentOutput):
    response: str
    status: str


class CritiqueOutput(AgentOutput):
    critique: str
    status: str


class SuggestionsOutput(AgentOutput):
    suggestions: str
    status: str


__all__ = [
    "AgentInput",
    "AgentOutput",
    "DirectorInput",
    "QuestionInput",
    "ReconInput",
    "VulnInput",
    "FlagInput",
    "LearnInput",
    "TaskInput",
    "CriticInput",
    "EducationInput",
    "DirectorOutput",
    "AnswerOutput",
    "ReconOutput",
    "PrioritizedVulnerability",
    "VulnOutput",
    "FlagOutput",
    "LearnOutput",
    "TaskOutput",
    "CritiqueOutput",
    "SuggestionsOutput",
]
