from __future__ import annotations

import time
from typing import AsyncIterator, Dict, List, Optional

from agents_hub._logging import get_component_logger
from agents_hub.llm.adapters.base import BackendAdapter
from agents_hub.llm.adapters.openai_chat import OpenAIChatAdapter
from agents_hub.llm.endpoints import BackendKind, EndpointSpec
from agents_hub.llm.types import (
    ErrorCategory,
    InferenceRequest,
    InferenceResult,
    InferenceStreamEvent,
    LLMError,
    StreamEventType,
)


class LLMClient:
    """Single-endpoint client shared by every agent handler."""

    def __init__(
        self,
        endpoint: EndpointSpec,
        adapter_overrides: Optional[Dict[BackendKind, BackendAdapter]] = None,
        logger=None,
    ):
        self.endpoint = endpoint
        self.adapters: Dict[BackendKind, BackendAdapter] = {
            BackendKind.OPENAI_CHAT: OpenAIChatAdapter(),
        }
        if adapter_overrides:
            self.adapters.update(adapter_overrides)
        self._logger = get_component_logger("LLMClient", logger)

    async def stream_infer(self, request: InferenceRequest) -> AsyncIterator[InferenceStreamEvent]:
        adapter = self.adapters.get(self.endpoint.backend_kind)
        if adapter is None:
            err = LLMError(
                ErrorCategory.UNKNOWN, f"No adapter for backend {self.endpoint.backend_kind}"
            )
            yield InferenceStreamEvent(type=StreamEventType.ERROR, error=err)
            return
        async for event in adapter.stream_infer(self.endpoint, request):
            yield event

    async def complete(self, request: InferenceRequest) -> InferenceResult:
        """Collect a stream into one result.

        Raises:
            LLMError: On the first error event
        """
        started = time.monotonic()
        chunks: List[str] = []
        finish_reason = None
        usage = None
        raw = None

        async for event in self.stream_infer(request):
            if event.type == StreamEventType.ERROR:
                error = event.error or LLMError(ErrorCategory.UNKNOWN, "unknown backend error")
                self._logger.warning(
                    "llm_request_failed",
                    endpoint=self.endpoint.name,
                    category=error.category.value,
                    error=error.message,
                )
                raise error
            if event.type in (StreamEventType.TOKEN, StreamEventType.MESSAGE) and event.content:
                chunks.append(event.content)
                raw = event.raw
            if event.finish_reason:
                finish_reason = event.finish_reason
            if event.usage:
                usage = event.usage

        self._logger.debug(
            "llm_request_completed",
            endpoint=self.endpoint.name,
            finish_reason=finish_reason,
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        return InferenceResult(
            message="".join(chunks),
            finish_reason=finish_reason,
            usage=usage,
            raw=raw,
        )
