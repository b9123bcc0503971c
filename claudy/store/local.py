"""Local filesystem config store.

Stores the registry as a single JSON file, by default::

    ~/.config/claudy/workspaces.json

The path is injected at construction so tests never touch real user state.

Writes are atomic: data is written to a temporary file in the same directory,
then renamed to the target path.  Every save rewrites the whole document;
there is no locking, so concurrent invocations follow last-writer-wins.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from claudy.console import warn
from claudy.models.workspace import WorkspaceConfig


class LocalConfigStore:
    """JSON file implementation of the WorkspaceStore protocol."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # -- Read ------------------------------------------------------------------

    def load(self) -> WorkspaceConfig:
        if not self._path.exists():
            logger.debug("No config at {}, starting empty", self._path)
            return WorkspaceConfig()

        try:
            raw = _read_file(self._path)
            data = json.loads(raw)
            if not isinstance(data, dict) or not isinstance(data.get("workspaces"), list):
                msg = "expected an object with a 'workspaces' list"
                raise ValueError(msg)
            config = WorkspaceConfig.model_validate(data)
        except (OSError, ValueError, RecursionError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError; deeply nested input hits the recursion limit.
            logger.debug("Discarding unreadable config {}: {}", self._path, exc)
            warn("Config corrupted, starting fresh", indent="")
            return WorkspaceConfig()

        logger.debug("Loaded {} workspace(s) from {}", len(config.workspaces), self._path)
        return config

    # -- Write -----------------------------------------------------------------

    def save(self, config: WorkspaceConfig) -> None:
        _atomic_write(self._path, config.dump_json())
        logger.debug("Saved {} workspace(s) to {}", len(config.workspaces), self._path)


# -- Helpers -------------------------------------------------------------------


def _atomic_write(path: Path, data: str) -> None:
    """Write data atomically: temp file + rename.

    The temp file is created in the same directory so ``os.replace`` is atomic
    on POSIX.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def _read_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")
