from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from feedloader.config import AppConfig
from feedloader.main import _build_parser, _resolve_config, _run

from .helpers import make_item, make_items_json

URL = "https://a-url.com/feed"


def _config() -> AppConfig:
    return AppConfig.model_validate({"feed": {"url": URL}})


@pytest.mark.asyncio
async def test_run_prints_one_json_line_per_item(capsys: pytest.CaptureFixture[str]) -> None:
    first, first_json = make_item("https://a-url.com/1.png")
    second, second_json = make_item("https://a-url.com/2.png", location="Berlin")
    transport = httpx.MockTransport(
        lambda r: httpx.Response(200, content=make_items_json([first_json, second_json]))
    )

    exit_code = await _run(_config(), transport=transport)

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert [json.loads(line) for line in lines] == [first_json, second_json]


@pytest.mark.asyncio
async def test_run_returns_one_on_invalid_data(capsys: pytest.CaptureFixture[str]) -> None:
    transport = httpx.MockTransport(lambda r: httpx.Response(500, content=make_items_json([])))

    exit_code = await _run(_config(), transport=transport)

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_cli_url_overrides_config(tmp_path: Path) -> None:
    path = tmp_path / "feedloader.yaml"
    path.write_text("feed:\n  url: https://old-url.com/feed\n", encoding="utf-8")
    args = _build_parser().parse_args(["--config", str(path), "--url", URL, "--log-level", "debug"])

    config = _resolve_config(args)

    assert str(config.feed.url) == URL
    assert config.logging.level == "DEBUG"


def test_cli_url_without_config() -> None:
    config = _resolve_config(_build_parser().parse_args(["--url", URL]))

    assert str(config.feed.url) == URL


def test_cli_requires_config_or_url() -> None:
    with pytest.raises(SystemExit):
        _resolve_config(_build_parser().parse_args([]))
