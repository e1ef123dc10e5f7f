from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .clock import utc_stamp
from .repo_root import resolve_root

OutputFormat = Literal["text", "json"]
ExtractMode = Literal["line", "yaml"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat
    extract_mode: ExtractMode
    color: bool
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def collections_dir(self) -> Path:
        return self.repo_root / "collections"

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        repo_root: Path | None = None,
        output_format: OutputFormat = "text",
        extract_mode: ExtractMode = "line",
        no_color: bool = False,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        resolved_root = repo_root.resolve() if repo_root is not None else resolve_root()
        resolved_run_id = run_id or os.environ.get("RUN_ID") or f"links-{utc_stamp()}"
        color = not no_color and not os.environ.get("NO_COLOR")
        return cls(
            run_id=resolved_run_id,
            repo_root=resolved_root,
            output_format=output_format,
            extract_mode=extract_mode,
            color=color,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )
