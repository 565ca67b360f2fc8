from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator

from agents_hub.llm.endpoints import EndpointSpec
from agents_hub.llm.types import InferenceRequest, InferenceStreamEvent


class BackendAdapter(ABC):
    @abstractmethod
    def stream_infer(
        self, endpoint: EndpointSpec, request: InferenceRequest
    ) -> AsyncIterator[InferenceStreamEvent]:
        ...
