"""Store interface for the workspace registry.

The registry depends only on this protocol, so tests and alternative
backends can swap the JSON file for anything that loads and saves a
``WorkspaceConfig``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from claudy.models.workspace import WorkspaceConfig


@runtime_checkable
class WorkspaceStore(Protocol):
    """Synchronous protocol for reading and writing the whole registry."""

    def load(self) -> WorkspaceConfig:
        """Return the persisted config, or an empty one.  Never raises."""
        ...

    def save(self, config: WorkspaceConfig) -> None:
        """Replace the persisted config with ``config``."""
        ...
