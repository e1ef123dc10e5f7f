from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..errors import ScriptError
from ..exit_codes import ERR_VALIDATION

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


@lru_cache(maxsize=None)
def _validator(schema_name: str) -> Draft202012Validator:
    catalog = json.loads((SCHEMAS_DIR / "catalog.json").read_text(encoding="utf-8"))
    files = {row["name"]: row["file"] for row in catalog.get("schemas", [])}
    if schema_name not in files:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION, kind="schema_unknown")
    schema = json.loads((SCHEMAS_DIR / files[schema_name]).read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate(schema_name: str, payload: Any) -> None:
    errors = sorted(_validator(schema_name).iter_errors(payload), key=lambda e: list(e.absolute_path))
    if not errors:
        return
    first = errors[0]
    loc = "/".join(str(p) for p in first.absolute_path) or "<root>"
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    raise ScriptError(
        f"{schema_name} payload rejected at {loc}: {first.message}{more}",
        ERR_VALIDATION,
        kind="schema_violation",
    )
