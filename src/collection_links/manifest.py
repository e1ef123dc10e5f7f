"""Path-entry extraction from collection manifests.

The default `line` mode is a fixed-pattern scan, not a YAML parser: only lines of
the shape `- path:<value>` (after optional leading whitespace) are recognised.
Quoted values, block scalars and every other shape are ignored. The `yaml` mode
parses the document and collects `path` keys of sequence-item mappings instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .core.context import ExtractMode
from .core.yaml_utils import compose_documents, iter_item_paths
from .errors import ScriptError
from .exit_codes import ERR_CONFIG

_PATH_LINE_RE = re.compile(r"^\s*- path:(?P<value>.*)$")
_WHITESPACE_RE = re.compile(r"\s+")
_IGNORED_VALUE_PREFIXES = ('"', "'", "|", ">")


@dataclass(frozen=True)
class PathEntry:
    value: str
    line: int
    manifest: Path

    def resolve(self, root: Path) -> Path:
        # Always joined under the root, even when the value starts with `/`.
        return root / self.value.lstrip("/")


@dataclass(frozen=True)
class CollectionFile:
    path: Path
    entries: tuple[PathEntry, ...]


def parse_path_line(line: str) -> str | None:
    match = _PATH_LINE_RE.match(line)
    if match is None:
        return None
    value = _WHITESPACE_RE.sub("", match.group("value"))
    if not value or value.startswith(_IGNORED_VALUE_PREFIXES):
        return None
    return value


def extract_line_entries(path: Path, text: str) -> tuple[PathEntry, ...]:
    entries: list[PathEntry] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        value = parse_path_line(line)
        if value is not None:
            entries.append(PathEntry(value=value, line=lineno, manifest=path))
    return tuple(entries)


def extract_yaml_entries(path: Path, text: str) -> tuple[PathEntry, ...]:
    entries: list[PathEntry] = []
    for document in compose_documents(text, str(path)):
        for value, lineno in iter_item_paths(document):
            entries.append(PathEntry(value=value, line=lineno, manifest=path))
    return tuple(entries)


def read_collection(path: Path, mode: ExtractMode = "line") -> CollectionFile:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ScriptError(
            f"unable to decode collection file {path} as UTF-8 at byte {exc.start}", ERR_CONFIG, kind="manifest_unreadable"
        ) from exc
    except OSError as exc:
        raise ScriptError(f"unable to read collection file {path}: {exc.strerror}", ERR_CONFIG, kind="manifest_unreadable") from exc
    if mode == "yaml":
        entries = extract_yaml_entries(path, text)
    else:
        entries = extract_line_entries(path, text)
    return CollectionFile(path=path, entries=entries)
