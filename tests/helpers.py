from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def write_manifest(path: Path, *paths: str, header: str = "id: sample\nitems:\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"  - path: {value}\n    kind: doc\n" for value in paths)
    path.write_text(header + body, encoding="utf-8")
    return path


def run_collection_links(*args: str, cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    merged = os.environ.copy()
    merged["PYTHONPATH"] = str(ROOT / "src")
    merged["PYTHONIOENCODING"] = "utf-8"
    merged.pop("NO_COLOR", None)
    merged.setdefault("RUN_ID", "pytest-run")
    if env:
        merged.update(env)
    return subprocess.run(
        [sys.executable, "-m", "collection_links", *args],
        cwd=(cwd or ROOT),
        env=merged,
        text=True,
        encoding="utf-8",
        capture_output=True,
        check=False,
    )
