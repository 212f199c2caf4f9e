from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Erfolgreiches Ergebnis mit Nutzwert."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Fehlgeschlagenes Ergebnis mit Fehlerwert."""

    error: E


Result = Union[Success[T], Failure[E]]
