from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class BackendKind(str, Enum):
    OPENAI_CHAT = "openai_chat"


@dataclass
class EndpointSpec:
    name: str
    base_url: str  # includes the API version prefix, e.g. http://localhost:11434/v1
    backend_kind: BackendKind = BackendKind.OPENAI_CHAT
    model: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass
class HealthState:
    status: str  # healthy | degraded | unhealthy | unknown
    checked_at: Optional[float] = None
    detail: Optional[str] = None
