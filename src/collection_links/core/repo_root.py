"""Repository root resolution.

The root is anchored on the package location, never on the working directory:
two levels above the `collection_links` package directory (package -> `src/` -> root).
"""

from __future__ import annotations

from pathlib import Path

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

PACKAGE_DIR = Path(__file__).resolve().parents[1]


def resolve_root(package_dir: Path | None = None) -> Path:
    anchor = (package_dir or PACKAGE_DIR).resolve()
    parents = anchor.parents
    if len(parents) < 2 or not parents[1].is_dir():
        raise ScriptError(f"unable to resolve repository root from {anchor}", ERR_CONFIG, kind="root_unresolved")
    return parents[1]
