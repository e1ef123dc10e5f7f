"""JSON output contracts; schemas live in `schemas/` and are listed in `schemas/catalog.json`."""

from __future__ import annotations

from .validate import SCHEMAS_DIR, validate

__all__ = ["SCHEMAS_DIR", "validate"]
