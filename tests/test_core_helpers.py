from __future__ import annotations

import re
from pathlib import Path

import pytest

from collection_links.core import repo_root as repo_root_mod
from collection_links.core.context import RunContext
from collection_links.core.repo_root import resolve_root
from collection_links.cli.output import dumps_json
from collection_links.errors import ScriptError
from collection_links.exit_codes import ERR_CONFIG, ERR_INTERNAL


def test_resolve_root_is_two_levels_above_package() -> None:
    root = resolve_root()
    assert root == repo_root_mod.PACKAGE_DIR.parents[1]
    assert (root / "src" / "collection_links").is_dir()


def test_resolve_root_from_explicit_package_dir(tmp_path: Path) -> None:
    pkg = tmp_path / "src" / "collection_links"
    pkg.mkdir(parents=True)
    assert resolve_root(pkg) == tmp_path.resolve()


def test_resolve_root_fails_without_two_parents() -> None:
    with pytest.raises(ScriptError) as excinfo:
        resolve_root(Path("/"))
    assert excinfo.value.code == ERR_CONFIG
    assert excinfo.value.kind == "root_unresolved"


def test_run_context_defaults(tmp_path: Path) -> None:
    ctx = RunContext.from_args(None, repo_root=tmp_path)
    assert re.fullmatch(r"links-\d{8}-\d{6}", ctx.run_id)
    assert ctx.collections_dir == tmp_path.resolve() / "collections"
    assert ctx.color is True
    assert ctx.extract_mode == "line"


def test_run_context_reads_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUN_ID", "from-env")
    monkeypatch.setenv("NO_COLOR", "1")
    ctx = RunContext.from_args(None, repo_root=tmp_path)
    assert ctx.run_id == "from-env"
    assert ctx.color is False
    assert RunContext.from_args("explicit", repo_root=tmp_path).run_id == "explicit"


def test_script_error_defaults_to_internal_code() -> None:
    exc = ScriptError("boom")
    assert exc.code == ERR_INTERNAL
    assert str(exc) == "boom"


def test_dumps_json_is_sorted_and_keeps_unicode() -> None:
    assert dumps_json({"b": 1, "a": "✓"}) == '{"a": "✓", "b": 1}'
    assert dumps_json({"a": 1}, pretty=True) == '{\n  "a": 1\n}'
