from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

if __package__ in (None, ""):
    # Als Skript ausgeführt: Projektwurzel zum Pfad hinzufügen.
    sys.path.append(str(Path(__file__).resolve().parent.parent))
    from feedloader import (  # type: ignore
        AppConfig,
        Failure,
        HttpxHTTPClient,
        RemoteFeedLoader,
        load_async,
        load_config,
    )
    from feedloader.api.mapper import feed_item_to_wire  # type: ignore
    from feedloader.config import LoggingConfig  # type: ignore
else:
    from . import AppConfig, Failure, HttpxHTTPClient, RemoteFeedLoader, load_async, load_config
    from .api.mapper import feed_item_to_wire
    from .config import LoggingConfig


def _configure_logging(config: LoggingConfig) -> None:
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)
    root_logger.handlers.clear()

    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    """Kombiniert Konfigdatei und CLI-Overrides; CLI gewinnt."""
    raw: Dict[str, Any] = load_config(args.config).model_dump() if args.config else {}
    if args.url:
        raw.setdefault("feed", {})["url"] = args.url
    if args.log_level:
        raw.setdefault("logging", {})["level"] = args.log_level
    if "feed" not in raw:
        raise SystemExit("Entweder --config oder --url angeben.")
    return AppConfig.model_validate(raw)


async def _run(config: AppConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    logger = logging.getLogger("feedloader.main")
    async with HttpxHTTPClient(config=config.http, transport=transport) as client:
        loader = RemoteFeedLoader(client, str(config.feed.url))
        result = await load_async(loader)
    if isinstance(result, Failure):
        logger.error("Feed konnte nicht geladen werden: %s", result.error.value)
        return 1
    logger.info("%s Items geladen von %s", len(result.value), loader.url)
    for item in result.value:
        sys.stdout.write(json.dumps(feed_item_to_wire(item)) + "\n")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lädt einen Feed einmalig und gibt die Items aus")
    parser.add_argument("--config", help="Pfad zur feedloader.yaml")
    parser.add_argument("--url", help="Feed-URL, überschreibt feed.url aus der Konfig")
    parser.add_argument("--log-level", help="Loglevel, z. B. DEBUG oder INFO")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    config = _resolve_config(args)
    _configure_logging(config.logging)
    sys.exit(asyncio.run(_run(config)))


if __name__ == "__main__":
    main()
