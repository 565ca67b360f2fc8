from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(str, Enum):
    TIMEOUT = "timeout"
    BACKEND = "backend"
    CONNECTION = "connection"
    PARSE = "parse"
    UNKNOWN = "unknown"


class StreamEventType(str, Enum):
    TOKEN = "token"
    MESSAGE = "message"
    ERROR = "error"
    DONE = "done"


@dataclass
class LLMError(Exception):
    category: ErrorCategory
    message: str
    raw_backend: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


@dataclass
class Message:
    role: str
    content: str


@dataclass
class InferenceRequest:
    messages: List[Message]
    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    json_mode: bool = False
    stream: bool = False
    extra_params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class InferenceStreamEvent:
    """
    Stream-first contract:
      - type: token | message | error | done
    """
    type: StreamEventType
    content: Optional[str] = None
    raw: Optional[Any] = None
    error: Optional[LLMError] = None
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None


@dataclass
class InferenceResult:
    message: Optional[str]
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None
    raw: Optional[Any] = None
