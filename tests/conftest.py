from __future__ import annotations

from pathlib import Path

import pytest

_ALLOWED_MARKERS = {"unit", "integration"}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("RUN_ID", raising=False)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    (repo / "collections").mkdir(parents=True)
    (repo / "docs").mkdir()
    (repo / "docs/readme.md").write_text("# readme\n", encoding="utf-8")
    (repo / "docs/guide.md").write_text("# guide\n", encoding="utf-8")
    return repo
