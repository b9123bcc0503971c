"""Unit tests for path resolution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from claudy.paths import exists, resolve_path


@pytest.mark.parametrize("value", ["", None])
def test_empty_is_cwd(value: str | None, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_path(value) == os.getcwd()


def test_home_marker(home: Path) -> None:
    assert resolve_path("~") == str(home)
    assert resolve_path("~/") == str(home)
    assert resolve_path("~/code/app") == str(home / "code" / "app")


def test_home_marker_normalises(home: Path) -> None:
    assert resolve_path("~/code/../lib/./x") == str(home / "lib" / "x")


def test_relative(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()

    assert resolve_path("sub") == os.path.join(cwd, "sub")
    assert resolve_path("./sub/../other") == os.path.join(cwd, "other")


def test_absolute_is_normalised() -> None:
    assert resolve_path("/srv//api/../web/") == "/srv/web"


def test_exists(tmp_path: Path) -> None:
    file = tmp_path / "file.txt"
    file.write_text("x")

    assert exists(str(tmp_path)) is True
    assert exists(str(file)) is True
    assert exists(str(tmp_path / "missing")) is False
