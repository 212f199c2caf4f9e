from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.result import Result


class HTTPResponse(BaseModel):
    """Metadaten einer HTTP-Antwort, soweit die Pipeline sie braucht."""

    url: str
    status_code: int = Field(..., ge=0)
    headers: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


HTTPClientResult = Result[Tuple[bytes, HTTPResponse], Exception]
HTTPClientCompletion = Callable[[HTTPClientResult], None]


class HTTPClient(ABC):
    """Abstrakter Transport: genau ein GET pro Aufruf, genau eine Completion."""

    @abstractmethod
    def get(self, url: str, completion: HTTPClientCompletion) -> None:
        """Startet den Request; completion wird asynchron genau einmal aufgerufen."""
