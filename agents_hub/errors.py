"""Error taxonomy for the agents hub.

Routing misses are not errors: the hub reports them as system messages.
Everything a handler can raise derives from ``HubError`` so the hub can
tell user mistakes apart from backend failures.
"""

from typing import Optional

from agents_hub.llm.types import LLMError


class HubError(Exception):
    """Base class for hub errors."""


class TaskValidationError(HubError):
    """The task text is missing a required field or is malformed.

    Raised before any LLM call is made.
    """

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class AgentBackendError(HubError):
    """The LLM call failed or returned nothing usable."""

    def __init__(self, message: str, *, cause: Optional[LLMError] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def category(self) -> Optional[str]:
        return self.cause.category.value if self.cause else None


class HubBusyError(HubError):
    """A submission arrived while another handler call is still pending."""

    def __init__(self, awaiting_tag: str):
        super().__init__(f"{awaiting_tag} is currently processing a task.")
        self.awaiting_tag = awaiting_tag


__all__ = [
    "HubError",
    "TaskValidationError",
    "AgentBackendError",
    "HubBusyError",
]
