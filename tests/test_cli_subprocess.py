from __future__ import annotations

import json
from pathlib import Path

import pytest
from helpers import ROOT, run_collection_links, write_manifest

from collection_links import __version__

pytestmark = pytest.mark.integration


def test_repository_collections_pass() -> None:
    proc = run_collection_links("--no-color")
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert "Validation PASSED" in proc.stdout
    for manifest in sorted((ROOT / "collections").glob("*.yml")):
        assert f"Validating: {manifest}" in proc.stdout


def test_explicit_manifest_resolves_against_repository_root(tmp_path: Path) -> None:
    manifest = write_manifest(tmp_path / "extra.yml", "pyproject.toml", "docs/not-in-this-repo.md")
    proc = run_collection_links(str(manifest), "--no-color")
    assert proc.returncode == 1
    assert "✓ pyproject.toml" in proc.stdout
    assert "✗ docs/not-in-this-repo.md (NOT FOUND)" in proc.stdout
    assert "  Checked: 2 paths" in proc.stdout


def test_missing_explicit_manifest_exits_one(tmp_path: Path) -> None:
    proc = run_collection_links(str(tmp_path / "absent.yml"), "--no-color")
    assert proc.returncode == 1
    assert "Collection file not found" in proc.stdout
    assert "Summary:" not in proc.stdout


def test_json_report_from_subprocess() -> None:
    proc = run_collection_links("--json")
    assert proc.returncode == 0, proc.stderr
    payload = json.loads(proc.stdout)
    assert payload["tool"] == "collection-links"
    assert payload["root"] == str(ROOT)
    assert payload["summary"]["missing"] == 0


def test_version_flag() -> None:
    proc = run_collection_links("--version")
    assert proc.returncode == 0
    assert proc.stdout.strip() == f"collection-links {__version__}"
