from __future__ import annotations

import asyncio
import logging
from typing import Optional, Set

import httpx

from ..config import HTTPClientConfig
from ..core.result import Failure, Success
from .http_client import HTTPClient, HTTPClientCompletion, HTTPClientResult, HTTPResponse


class HttpxHTTPClient(HTTPClient):
    """HTTPClient auf Basis von httpx.AsyncClient.

    Jeder get()-Aufruf läuft als eigener Task auf der laufenden Event-Loop;
    Requests teilen sich nur den Connection-Pool.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        config: Optional[HTTPClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = _build_client(config or HTTPClientConfig(), transport)
        self._client = client
        self._logger = logging.getLogger("feedloader.http")
        self._pending_tasks: Set[asyncio.Task] = set()
        self._requests = 0
        self._failures = 0

    def get(self, url: str, completion: HTTPClientCompletion) -> None:
        task = asyncio.get_running_loop().create_task(self._perform(url, completion))
        self._pending_tasks.add(task)
        task.add_done_callback(self._pending_tasks.discard)

    async def _perform(self, url: str, completion: HTTPClientCompletion) -> None:
        self._requests += 1
        result: HTTPClientResult
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._failures += 1
            self._logger.warning("GET failed url=%s error=%s", url, exc)
            result = Failure(exc)
        except Exception as exc:
            self._failures += 1
            self._logger.warning("GET failed url=%s unexpected error=%r", url, exc)
            result = Failure(exc)
        else:
            result = Success(
                (
                    response.content,
                    HTTPResponse(
                        url=str(response.url),
                        status_code=response.status_code,
                        headers=dict(response.headers),
                    ),
                )
            )
        try:
            completion(result)
        except Exception:
            self._logger.exception("Completion failed url=%s", url)

    async def aclose(self) -> None:
        """Wartet laufende Requests ab und schließt einen eigenen Client."""
        if self._pending_tasks:
            await asyncio.gather(*list(self._pending_tasks), return_exceptions=True)
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def stats(self) -> dict:
        return {
            "requests": self._requests,
            "failures": self._failures,
            "in_flight": len(self._pending_tasks),
        }


def _build_client(
    config: HTTPClientConfig, transport: Optional[httpx.AsyncBaseTransport]
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_s),
        follow_redirects=config.follow_redirects,
        max_redirects=config.max_redirects,
        headers={"User-Agent": config.user_agent, "Accept": "application/json"},
        limits=httpx.Limits(max_connections=config.max_connections),
        transport=transport,
    )
