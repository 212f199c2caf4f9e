"""
Lädt einen entfernten Feed per HTTP und liefert FeedItems oder einen klassifizierten Fehler.

Dieses Paket deklariert nur die öffentlich verfügbaren Einstiegspunkte
für Loader, Transport und die Konfig-Ladefunktion.
"""

from .api import HTTPClient, HTTPResponse, HttpxHTTPClient, RemoteFeedLoader, map_feed_items
from .config import AppConfig, load_config
from .core import (
    Failure,
    FeedItem,
    FeedLoader,
    FeedLoadResult,
    RemoteFeedLoaderError,
    Success,
    load_async,
)

__all__ = [
    "AppConfig",
    "Failure",
    "FeedItem",
    "FeedLoadResult",
    "FeedLoader",
    "HTTPClient",
    "HTTPResponse",
    "HttpxHTTPClient",
    "RemoteFeedLoader",
    "RemoteFeedLoaderError",
    "Success",
    "load_async",
    "load_config",
    "map_feed_items",
]
