"""collection-links CLI package."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["build_parser", "main"]


def build_parser() -> Any:
    return import_module("collection_links.cli.main").build_parser()


def main(argv: list[str] | None = None) -> int:
    return int(import_module("collection_links.cli.main").main(argv))
