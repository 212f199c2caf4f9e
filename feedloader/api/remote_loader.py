from __future__ import annotations

import logging
import weakref

from ..core.errors import RemoteFeedLoaderError
from ..core.loader import FeedLoadCompletion, FeedLoader, FeedLoadResult
from ..core.result import Failure
from .http_client import HTTPClient, HTTPClientResult
from .mapper import map_feed_items


class RemoteFeedLoader(FeedLoader):
    """Verkabelt Transport, Mapper und Aufrufer-Completion für eine Feed-URL.

    Jeder load()-Aufruf löst genau einen Request aus. Die Transport-Completion
    hält nur eine schwache Referenz auf den Loader: ist er bis dahin
    eingesammelt, wird das Ergebnis verworfen.
    """

    def __init__(self, client: HTTPClient, url: str) -> None:
        self._client = client
        self._url = str(url)
        self._logger = logging.getLogger("feedloader.remote")
        self._requests = 0
        self._delivered = 0
        self._failures = 0

    @property
    def url(self) -> str:
        return self._url

    def load(self, completion: FeedLoadCompletion) -> None:
        loader_ref = weakref.ref(self)
        logger = self._logger
        url = self._url

        def _on_result(result: HTTPClientResult) -> None:
            loader = loader_ref()
            if loader is None:
                logger.debug("Loader verworfen, Ergebnis für %s ignoriert.", url)
                return
            completion(loader._map(result))

        self._requests += 1
        self._client.get(self._url, _on_result)

    def _map(self, result: HTTPClientResult) -> FeedLoadResult:
        self._delivered += 1
        if isinstance(result, Failure):
            self._failures += 1
            self._logger.warning("GET failed url=%s error=%r", self._url, result.error)
            return Failure(RemoteFeedLoaderError.connectivity)
        data, response = result.value
        mapped = map_feed_items(data, response.status_code)
        if isinstance(mapped, Failure):
            self._failures += 1
            self._logger.info(
                "Ungültige Antwort url=%s status=%s bytes=%s",
                self._url,
                response.status_code,
                len(data),
            )
        return mapped

    def stats(self) -> dict:
        return {
            "url": self._url,
            "requests": self._requests,
            "delivered": self._delivered,
            "failures": self._failures,
        }
