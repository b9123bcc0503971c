"""Data models for the workspace registry."""

from claudy.models.workspace import Workspace, WorkspaceConfig

__all__ = ["Workspace", "WorkspaceConfig"]
