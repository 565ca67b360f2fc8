from .types import (
    InferenceRequest,
    InferenceResult,
    InferenceStreamEvent,
    Message,
    LLMError,
    ErrorCategory,
    StreamEventType,
)
from .endpoints import EndpointSpec, HealthState, BackendKind
from .client import LLMClient
from .health import HealthProbe, HttpHealthProbe

__all__ = [
    # Types
    "InferenceRequest",
    "InferenceResult",
    "InferenceStreamEvent",
    "Message",
    "LLMError",
    "ErrorCategory",
    "StreamEventType",
    # Endpoints
    "EndpointSpec",
    "HealthState",
    "BackendKind",
    # Client
    "LLMClient",
    # Health
    "HealthProbe",
    "HttpHealthProbe",
]
