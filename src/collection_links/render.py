"""Text and JSON rendering of validation results."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from . import __version__
from .validator import EntryResult, ManifestResult, ValidationReport

GREEN = "\033[0;32m"
RED = "\033[0;31m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"

SEPARATOR = "-" * 40
RULE = "=" * 40
REPORT_SCHEMA = "collection-links.report.v1"


class TextReporter:
    def __init__(self, color: bool = True, write: Callable[[str], None] = print) -> None:
        self.color = color
        self._write = write

    def _paint(self, text: str, code: str) -> str:
        return f"{code}{text}{RESET}" if self.color else text

    def manifest_missing(self, path: Path) -> None:
        self._write(self._paint(f"✗ Collection file not found: {path}", RED))

    def manifest_start(self, path: Path) -> None:
        self._write(self._paint(f"Validating: {path}", YELLOW))
        self._write(SEPARATOR)

    def entry(self, result: EntryResult) -> None:
        if result.exists:
            self._write(self._paint(f"✓ {result.entry.value}", GREEN))
        else:
            self._write(self._paint(f"✗ {result.entry.value} (NOT FOUND)", RED))

    def manifest_end(self, result: ManifestResult) -> None:
        self._write("")

    def summary(self, report: ValidationReport) -> None:
        self._write(RULE)
        self._write("Summary:")
        self._write(f"  Checked: {report.checked} paths")
        self._write(self._paint(f"  Valid: {report.valid}", GREEN))
        if report.missing > 0:
            self._write(self._paint(f"  Missing: {report.missing}", RED))
        self._write(RULE)
        if report.missing > 0:
            self._write(self._paint("Validation FAILED", RED))
        else:
            self._write(self._paint("Validation PASSED", GREEN))


def _manifest_payload(result: ManifestResult) -> dict[str, object]:
    if not result.found:
        status = "not-found"
    else:
        status = "pass" if result.missing == 0 else "fail"
    return {
        "path": str(result.path),
        "status": status,
        "checked": result.checked,
        "missing": result.missing,
        "entries": [
            {"path": row.entry.value, "line": row.entry.line, "status": "valid" if row.exists else "missing"}
            for row in result.entries
        ],
    }


def report_payload(report: ValidationReport, run_id: str, root: Path) -> dict[str, object]:
    return {
        "schema_name": REPORT_SCHEMA,
        "schema_version": 1,
        "tool": "collection-links",
        "version": __version__,
        "status": "pass" if report.passed else "fail",
        "run_id": run_id,
        "root": str(root),
        "manifests": [_manifest_payload(row) for row in report.manifests],
        "summary": {
            "manifests": report.manifest_count,
            "checked": report.checked,
            "valid": report.valid,
            "missing": report.missing,
        },
    }
