from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID, uuid4

from feedloader.api.http_client import HTTPClient, HTTPClientCompletion, HTTPResponse
from feedloader.core.models import FeedItem
from feedloader.core.result import Failure, Success


class HTTPClientSpy(HTTPClient):
    """Merkt sich Requests; Completions werden vom Test ausgelöst."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, HTTPClientCompletion]] = []

    @property
    def requested_urls(self) -> List[str]:
        return [url for url, _ in self.messages]

    def get(self, url: str, completion: HTTPClientCompletion) -> None:
        self.messages.append((url, completion))

    def complete_with_error(self, error: Exception, index: int = 0) -> None:
        self.messages[index][1](Failure(error))

    def complete_with_status(self, code: int, data: bytes, index: int = 0) -> None:
        url = self.messages[index][0]
        self.messages[index][1](Success((data, HTTPResponse(url=url, status_code=code))))


def make_item(
    image_url: str,
    *,
    id: Optional[UUID] = None,
    description: Optional[str] = None,
    location: Optional[str] = None,
) -> Tuple[FeedItem, Dict[str, Any]]:
    model = FeedItem(id=id or uuid4(), description=description, location=location, image_url=image_url)
    payload = {
        "id": str(model.id),
        "description": model.description,
        "location": model.location,
        "image": str(model.image_url),
    }
    return model, {key: value for key, value in payload.items() if value is not None}


def make_items_json(items: List[Dict[str, Any]]) -> bytes:
    return json.dumps({"items": items}).encode("utf-8")


