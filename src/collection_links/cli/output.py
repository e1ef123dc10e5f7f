"""CLI payload output helpers."""

from __future__ import annotations

import json

from ..contracts import validate

ERROR_SCHEMA = "collection-links.error.v1"


def dumps_json(payload: object, pretty: bool = False) -> str:
    return json.dumps(payload, indent=2 if pretty else None, sort_keys=True, ensure_ascii=False)


def resolve_output_format(*, cli_json: bool, cli_format: str | None) -> str:
    if cli_json:
        return "json"
    return cli_format or "text"


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if not as_json:
        return message
    payload = {
        "schema_name": ERROR_SCHEMA,
        "schema_version": 1,
        "tool": "collection-links",
        "status": "error",
        "errors": [{"code": code, "kind": kind, "message": message}],
    }
    validate(ERROR_SCHEMA, payload)
    return dumps_json(payload)
