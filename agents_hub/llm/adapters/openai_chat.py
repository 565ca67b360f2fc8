"""
OpenAI Chat Completions adapter.

Supports OpenAI API and compatible endpoints (Ollama, vLLM, Gemini's
OpenAI-compatible surface). ``EndpointSpec.base_url`` carries the version
prefix, so the request path is always ``/chat/completions``.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, AsyncIterator, Dict, Iterable, Optional

import httpx

from agents_hub.llm.adapters.base import BackendAdapter
from agents_hub.llm.endpoints import EndpointSpec
from agents_hub.llm.types import (
    ErrorCategory,
    InferenceRequest,
    InferenceStreamEvent,
    LLMError,
    StreamEventType,
)

CHAT_COMPLETIONS_PATH = "/chat/completions"


def _categorize_exception(exc: Exception) -> LLMError:
    name = exc.__class__.__name__
    if "Timeout" in name:
        return LLMError(ErrorCategory.TIMEOUT, str(exc))
    if "Network" in name or "Connect" in name:
        return LLMError(ErrorCategory.CONNECTION, str(exc))
    return LLMError(ErrorCategory.BACKEND, str(exc))


def _parse_sse_lines(lines: Iterable[str]) -> Iterable[str]:
    """Parse SSE lines (data: ...) into JSON strings."""
    for line in lines:
        if not line:
            continue
        if line.startswith("data: "):
            payload = line[len("data: "):].strip()
        else:
            payload = line.strip()
        if payload == "[DONE]":
            break
        if payload:
            yield payload


def _http_error(status_code: int, raw: Any) -> LLMError:
    return LLMError(ErrorCategory.BACKEND, f"HTTP {status_code}", raw_backend=raw)


class OpenAIChatAdapter(BackendAdapter):
    """
    Adapter for the OpenAI Chat Completions API.

    Buffered requests yield one MESSAGE event followed by DONE.
    Streaming requests yield TOKEN events and a single DONE.
    Failures are reported as a single ERROR event, never raised.
    """

    def __init__(self, timeout: float = 120.0, max_retries: int = 1):
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

    def _build_headers(self, endpoint: EndpointSpec) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        api_key = endpoint.metadata.get("api_key")
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    async def stream_infer(
        self, endpoint: EndpointSpec, request: InferenceRequest
    ) -> AsyncIterator[InferenceStreamEvent]:
        base_url = endpoint.base_url.rstrip("/")
        payload = self._build_payload(request, default_model=endpoint.model)

        async with httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            headers=self._build_headers(endpoint),
        ) as client:
            for attempt in range(self.max_retries):
                yielded = False
                try:
                    if request.stream:
                        async with client.stream("POST", CHAT_COMPLETIONS_PATH, json=payload) as resp:
                            if resp.status_code >= 400:
                                raw = await resp.aread()
                                yield InferenceStreamEvent(
                                    type=StreamEventType.ERROR,
                                    error=_http_error(resp.status_code, raw),
                                )
                                return
                            async for event in self._stream_sse(resp):
                                yielded = True
                                yield event
                            return

                    resp = await client.post(CHAT_COMPLETIONS_PATH, json=payload)
                    if resp.status_code >= 400:
                        yield InferenceStreamEvent(
                            type=StreamEventType.ERROR,
                            error=_http_error(resp.status_code, resp.text),
                        )
                        return
                    data = resp.json()
                    choices = data.get("choices", [])
                    if choices:
                        message = choices[0].get("message") or {}
                        text = message.get("content") or ""
                        finish_reason = choices[0].get("finish_reason")
                    else:
                        text = ""
                        finish_reason = None

                    yield InferenceStreamEvent(
                        type=StreamEventType.MESSAGE,
                        content=text,
                        raw=data,
                        finish_reason=finish_reason,
                        usage=data.get("usage"),
                    )
                    yield InferenceStreamEvent(type=StreamEventType.DONE, finish_reason=finish_reason)
                    return

                except Exception as exc:
                    # Tokens already reached the caller; a retry would repeat them
                    if not yielded and attempt < self.max_retries - 1:
                        await asyncio.sleep(2 ** attempt)
                        continue
                    err = _categorize_exception(exc)
                    yield InferenceStreamEvent(type=StreamEventType.ERROR, error=err, raw=str(exc))
                    return

    def _build_payload(
        self, request: InferenceRequest, default_model: Optional[str] = None
    ) -> Dict[str, Any]:
        """Build OpenAI chat completions request payload."""
        payload: Dict[str, Any] = {
            "messages": [{"role": m.role, "content": m.content} for m in request.messages],
            "stream": request.stream,
        }

        model = request.model or default_model
        if model:
            payload["model"] = model

        if request.temperature is not None:
            payload["temperature"] = request.temperature

        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens

        if request.json_mode:
            payload["response_format"] = {"type": "json_object"}

        payload.update(request.extra_params)

        return payload

    async def _stream_sse(self, response: "httpx.Response") -> AsyncIterator[InferenceStreamEvent]:
        """Parse SSE stream from OpenAI chat completions."""
        async for line in response.aiter_lines():
            for payload in _parse_sse_lines([line]):
                try:
                    data = json.loads(payload)
                except json.JSONDecodeError as exc:
                    err = LLMError(ErrorCategory.PARSE, str(exc), raw_backend=payload)
                    yield InferenceStreamEvent(type=StreamEventType.ERROR, error=err, raw=payload)
                    continue

                choices = data.get("choices", [])
                if not choices:
                    continue

                choice = choices[0]
                content = (choice.get("delta") or {}).get("content")
                finish_reason = choice.get("finish_reason")

                if content:
                    yield InferenceStreamEvent(type=StreamEventType.TOKEN, content=content, raw=data)

                if finish_reason:
                    yield InferenceStreamEvent(
                        type=StreamEventType.DONE,
                        finish_reason=finish_reason,
                        raw=data,
                        usage=data.get("usage"),
                    )
                    return
