"""CLI configuration loaded from CLAUDY_* environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClaudySettings(BaseSettings):
    """Claudy settings.

    All fields are read from environment variables with the ``CLAUDY_`` prefix.
    For example, ``CLAUDY_CONFIG_DIR=/tmp/claudy`` maps to ``config_dir``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLAUDY_",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "WARNING"

    # -- Storage ---------------------------------------------------------------
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "claudy")
    """Directory holding ``workspaces.json``.  Created on first save."""

    # -- Launcher --------------------------------------------------------------
    claude_bin: str = "claude"
    """Executable spawned for every launch, looked up on PATH."""

    @property
    def config_file(self) -> Path:
        return self.config_dir.expanduser() / "workspaces.json"


@lru_cache(maxsize=1)
def get_settings() -> ClaudySettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return ClaudySettings()
