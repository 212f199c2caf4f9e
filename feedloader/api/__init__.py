from .http_client import HTTPClient, HTTPClientCompletion, HTTPClientResult, HTTPResponse
from .httpx_client import HttpxHTTPClient
from .mapper import encode_feed_items, map_feed_items
from .remote_loader import RemoteFeedLoader

__all__ = [
    "HTTPClient",
    "HTTPClientCompletion",
    "HTTPClientResult",
    "HTTPResponse",
    "HttpxHTTPClient",
    "RemoteFeedLoader",
    "encode_feed_items",
    "map_feed_items",
]
