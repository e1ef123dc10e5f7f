from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .core.context import ExtractMode, RunContext
from .core.logging import log_event
from .exit_codes import ERR_MISSING, OK
from .manifest import PathEntry, read_collection


@dataclass(frozen=True)
class EntryResult:
    entry: PathEntry
    exists: bool


@dataclass(frozen=True)
class ManifestResult:
    path: Path
    found: bool
    entries: tuple[EntryResult, ...] = ()

    @property
    def checked(self) -> int:
        return len(self.entries)

    @property
    def missing(self) -> int:
        return sum(1 for row in self.entries if not row.exists)


@dataclass
class ValidationReport:
    """Aggregate of one run; counters are derived from the per-manifest results."""

    manifests: list[ManifestResult] = field(default_factory=list)

    def add(self, result: ManifestResult) -> None:
        self.manifests.append(result)

    @property
    def manifest_count(self) -> int:
        return sum(1 for row in self.manifests if row.found)

    @property
    def checked(self) -> int:
        return sum(row.checked for row in self.manifests)

    @property
    def missing(self) -> int:
        return sum(row.missing for row in self.manifests)

    @property
    def valid(self) -> int:
        return self.checked - self.missing

    @property
    def passed(self) -> bool:
        return self.missing == 0 and all(row.found for row in self.manifests)


class Reporter(Protocol):
    def manifest_missing(self, path: Path) -> None: ...

    def manifest_start(self, path: Path) -> None: ...

    def entry(self, result: EntryResult) -> None: ...

    def manifest_end(self, result: ManifestResult) -> None: ...

    def summary(self, report: ValidationReport) -> None: ...


def target_exists(entry: PathEntry, root: Path) -> bool:
    # is_file() follows symlinks; directories never count.
    return entry.resolve(root).is_file()


def validate_collection(
    path: Path,
    root: Path,
    mode: ExtractMode = "line",
    reporter: Reporter | None = None,
) -> ManifestResult:
    if not path.is_file():
        if reporter is not None:
            reporter.manifest_missing(path)
        return ManifestResult(path=path, found=False)
    if reporter is not None:
        reporter.manifest_start(path)
    collection = read_collection(path, mode)
    rows: list[EntryResult] = []
    for entry in collection.entries:
        row = EntryResult(entry=entry, exists=target_exists(entry, root))
        rows.append(row)
        if reporter is not None:
            reporter.entry(row)
    result = ManifestResult(path=path, found=True, entries=tuple(rows))
    if reporter is not None:
        reporter.manifest_end(result)
    return result


def discover_collections(root: Path) -> list[Path]:
    collections_dir = root / "collections"
    if not collections_dir.is_dir():
        return []
    # Shell-glob semantics: hidden files never match `*.yml`.
    return sorted(p for p in collections_dir.glob("*.yml") if not p.name.startswith(".") and p.is_file())


def run(ctx: RunContext, manifest: str | None = None, reporter: Reporter | None = None) -> tuple[int, ValidationReport]:
    report = ValidationReport()
    if manifest is not None:
        result = validate_collection(Path(manifest), ctx.repo_root, ctx.extract_mode, reporter)
        report.add(result)
        if not result.found:
            log_event(ctx, "error", "validator", "manifest-missing", manifest=manifest)
            return ERR_MISSING, report
        log_event(ctx, "info", "validator", "manifest", manifest=manifest, checked=result.checked, missing=result.missing)
    else:
        if not ctx.collections_dir.is_dir():
            log_event(ctx, "warning", "validator", "collections-dir-missing", path=str(ctx.collections_dir))
        paths = discover_collections(ctx.repo_root)
        log_event(ctx, "info", "validator", "scan", path=str(ctx.collections_dir), manifests=len(paths))
        for path in paths:
            result = validate_collection(path, ctx.repo_root, ctx.extract_mode, reporter)
            report.add(result)
            log_event(ctx, "info", "validator", "manifest", manifest=str(path), checked=result.checked, missing=result.missing)
    if reporter is not None:
        reporter.summary(report)
    return (OK if report.missing == 0 else ERR_MISSING), report
