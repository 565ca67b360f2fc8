from __future__ import annotations

import time
from abc import ABC, abstractmethod

import httpx

from .endpoints import EndpointSpec, HealthState, BackendKind


class HealthProbe(ABC):
    @abstractmethod
    async def check(self, endpoint: EndpointSpec) -> HealthState:
        ...


class HttpHealthProbe(HealthProbe):
    """
    HTTP-based health probe for the configured LLM endpoint.

    openai_chat: GET {base_url}/models (authenticated when a key is set)
    """

    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout

    def _get_health_path(self, endpoint: EndpointSpec) -> str:
        if endpoint.backend_kind == BackendKind.OPENAI_CHAT:
            return "/models"
        return "/health"

    async def check(self, endpoint: EndpointSpec) -> HealthState:
        url = f"{endpoint.base_url.rstrip('/')}{self._get_health_path(endpoint)}"
        headers = {}
        api_key = endpoint.metadata.get("api_key")
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, headers=headers)
        except httpx.TimeoutException:
            return HealthState(status="unhealthy", checked_at=time.time(), detail="timeout")
        except httpx.ConnectError as exc:
            return HealthState(
                status="unhealthy",
                checked_at=time.time(),
                detail=f"connection error: {exc}",
            )
        except Exception as exc:
            return HealthState(
                status="unknown",
                checked_at=time.time(),
                detail=f"probe error: {type(exc).__name__}: {exc}",
            )

        if resp.status_code < 400:
            status = "healthy"
        elif resp.status_code < 500:
            status = "degraded"
        else:
            status = "unhealthy"
        return HealthState(status=status, checked_at=time.time(), detail=f"HTTP {resp.status_code}")
