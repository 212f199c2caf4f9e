from __future__ import annotations

import pytest

from .helpers import HTTPClientSpy


@pytest.fixture
def client() -> HTTPClientSpy:
    return HTTPClientSpy()
