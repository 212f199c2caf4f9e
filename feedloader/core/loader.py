from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, List

from .errors import RemoteFeedLoaderError
from .models import FeedItem
from .result import Result

FeedLoadResult = Result[List[FeedItem], RemoteFeedLoaderError]
FeedLoadCompletion = Callable[[FeedLoadResult], None]


class FeedLoader(ABC):
    """Basisklasse für alle Quellen, die eine Liste von FeedItems liefern."""

    @abstractmethod
    def load(self, completion: FeedLoadCompletion) -> None:
        """Startet einen Ladevorgang; das Ergebnis kommt höchstens einmal über completion."""


async def load_async(loader: FeedLoader) -> FeedLoadResult:
    """Wartet auf genau einen Ladevorgang von loader.

    Die Completion darf aus einem fremden Thread kommen, daher wird das
    Ergebnis über call_soon_threadsafe in die laufende Loop zurückgereicht.
    Der Aufrufer hält loader während des Wartens am Leben.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()

    def _resolve(result: FeedLoadResult) -> None:
        if not future.done():
            future.set_result(result)

    loader.load(lambda result: loop.call_soon_threadsafe(_resolve, result))
    return await future
