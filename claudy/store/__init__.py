"""Persistence for the workspace registry."""

from claudy.store.base import WorkspaceStore
from claudy.store.local import LocalConfigStore

__all__ = ["LocalConfigStore", "WorkspaceStore"]
