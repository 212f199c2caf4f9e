from __future__ import annotations

import json
import re
from typing import Annotated, Any, Dict, Iterable, List, Optional
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ValidationError

from ..core.errors import RemoteFeedLoaderError
from ..core.loader import FeedLoadResult
from ..core.models import AbsoluteUrl, FeedItem
from ..core.result import Failure, Success

OK_200 = 200

# Nur die kanonische 8-4-4-4-12 Form, ohne Klammern oder urn:uuid: Präfix.
_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _check_canonical_uuid(value: Any) -> Any:
    if isinstance(value, str) and not _CANONICAL_UUID.fullmatch(value):
        raise ValueError(f"Keine kanonische UUID: {value!r}")
    return value


class _RemoteFeedItem(BaseModel):
    id: Annotated[UUID, BeforeValidator(_check_canonical_uuid)]
    description: Optional[str] = None
    location: Optional[str] = None
    image: AbsoluteUrl

    @classmethod
    def from_item(cls, item: FeedItem) -> "_RemoteFeedItem":
        return cls(
            id=item.id,
            description=item.description,
            location=item.location,
            image=item.image_url,
        )

    def to_item(self) -> FeedItem:
        return FeedItem(
            id=self.id,
            description=self.description,
            location=self.location,
            image_url=self.image,
        )


class _Root(BaseModel):
    items: List[_RemoteFeedItem]


def map_feed_items(data: bytes, status_code: int) -> FeedLoadResult:
    """Wandelt Body und Statuscode in FeedItems oder invalid_data um.

    Nur Status 200 wird überhaupt geparst. Ein einziges fehlerhaftes Item
    verwirft den gesamten Payload, Teilergebnisse gibt es nicht.
    """
    if status_code != OK_200:
        return Failure(RemoteFeedLoaderError.invalid_data)
    try:
        root = _Root.model_validate_json(data)
    except ValidationError:
        return Failure(RemoteFeedLoaderError.invalid_data)
    return Success([item.to_item() for item in root.items])


def feed_item_to_wire(item: FeedItem) -> Dict[str, str]:
    """Ein Item als Wire-Objekt; leere Optionalfelder entfallen."""
    return _RemoteFeedItem.from_item(item).model_dump(mode="json", exclude_none=True)


def encode_feed_items(items: Iterable[FeedItem]) -> bytes:
    payload = {"items": [feed_item_to_wire(item) for item in items]}
    return json.dumps(payload).encode("utf-8")
