from .errors import RemoteFeedLoaderError
from .loader import FeedLoadCompletion, FeedLoader, FeedLoadResult, load_async
from .models import FeedItem
from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "FeedItem",
    "FeedLoadCompletion",
    "FeedLoadResult",
    "FeedLoader",
    "RemoteFeedLoaderError",
    "Result",
    "Success",
    "load_async",
]
