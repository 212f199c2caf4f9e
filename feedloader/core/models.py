from __future__ import annotations

from typing import Annotated, Optional
from uuid import UUID

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError

_ANY_URL = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    """Prüft auf eine absolute URL, gibt aber den Originalstring unverändert zurück."""
    try:
        _ANY_URL.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"Keine absolute URL: {value!r}") from exc
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]


class FeedItem(BaseModel):
    """Ein Eintrag des Feeds. Gleichheit ist strukturell über alle Felder."""

    id: UUID
    description: Optional[str] = None
    location: Optional[str] = None
    image_url: AbsoluteUrl

    model_config = ConfigDict(frozen=True)
