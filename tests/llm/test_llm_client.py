"""Tests for LLMClient stream collection."""

import pytest

from agents_hub.llm.adapters.base import BackendAdapter
from agents_hub.llm.client import LLMClient
from agents_hub.llm.endpoints import BackendKind, EndpointSpec
from agents_hub.llm.types import (
    ErrorCategory,
    InferenceRequest,
    InferenceStreamEvent,
    LLMError,
    Message,
    StreamEventType,
)


class ScriptedAdapter(BackendAdapter):
    def __init__(self, events):
        self.events = events
        self.requests = []

    async def stream_infer(self, endpoint, request):
        self.requests.append(request)
        for event in self.events:
            yield event


def make_client(events, mock_logger):
    adapter = ScriptedAdapter(events)
    client = LLMClient(
        EndpointSpec(name="test", base_url="http://x/v1"),
        adapter_overrides={BackendKind.OPENAI_CHAT: adapter},
        logger=mock_logger,
    )
    return client, adapter


def request():
    return InferenceRequest(messages=[Message(role="user", content="hi")])


@pytest.mark.asyncio
async def test_complete_joins_tokens(mock_logger):
    client, adapter = make_client(
        [
            InferenceStreamEvent(type=StreamEventType.TOKEN, content="{\"a\":"),
            InferenceStreamEvent(type=StreamEventType.TOKEN, content=" 1}"),
            InferenceStreamEvent(type=StreamEventType.DONE, finish_reason="stop"),
        ],
        mock_logger,
    )

    result = await client.complete(request())

    assert result.message == '{"a": 1}'
    assert result.finish_reason == "stop"
    assert len(adapter.requests) == 1


@pytest.mark.asyncio
async def test_complete_buffered_message(mock_logger):
    client, _ = make_client(
        [
            InferenceStreamEvent(
                type=StreamEventType.MESSAGE,
                content="hello",
                finish_reason="stop",
                usage={"total_tokens": 3},
            ),
            InferenceStreamEvent(type=StreamEventType.DONE, finish_reason="stop"),
        ],
        mock_logger,
    )

    result = await client.complete(request())

    assert result.message == "hello"
    assert result.usage == {"total_tokens": 3}


@pytest.mark.asyncio
async def test_complete_raises_on_error_event(mock_logger):
    error = LLMError(ErrorCategory.TIMEOUT, "read timed out")
    client, _ = make_client(
        [InferenceStreamEvent(type=StreamEventType.ERROR, error=error)],
        mock_logger,
    )

    with pytest.raises(LLMError) as exc_info:
        await client.complete(request())

    assert exc_info.value.category == ErrorCategory.TIMEOUT
    mock_logger.warning.assert_called_once()
    assert mock_logger.warning.call_args[0][0] == "llm_request_failed"


@pytest.mark.asyncio
async def test_unknown_backend_yields_error(mock_logger):
    client, _ = make_client([], mock_logger)
    client.adapters = {}

    events = [e async for e in client.stream_infer(request())]

    assert len(events) == 1
    assert events[0].type == StreamEventType.ERROR
    assert events[0].error.category == ErrorCategory.UNKNOWN


def test_llm_error_str():
    assert str(LLMError(ErrorCategory.PARSE, "bad json")) == "parse: bad json"
