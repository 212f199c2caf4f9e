from __future__ import annotations

from enum import Enum


class RemoteFeedLoaderError(str, Enum):
    """Die zwei Fehlerarten, die ein Ladevorgang an den Aufrufer meldet."""

    connectivity = "connectivity"
    invalid_data = "invalid_data"
