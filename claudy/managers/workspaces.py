"""Workspace registry operations.

Encapsulates all workspace data access: lookup, create, edit, delete.  The
registry is loaded from the store on construction and every successful
mutation writes the full config back immediately.

Operations raise domain exceptions from ``claudy.errors``; whether a failure
is fatal or just a warning is the caller's decision.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from claudy.errors import (
    DirectoryAlreadyAddedError,
    DirectoryInUseError,
    DirectoryNotFoundError,
    DuplicateWorkspaceError,
    InvalidWorkspaceNameError,
    NoWorkspacesError,
    SameAsWorkingDirectoryError,
    WorkspaceNotFoundError,
)
from claudy.models.workspace import Workspace, WorkspaceConfig
from claudy.paths import exists, resolve_path
from claudy.store.base import WorkspaceStore


def _check_name(name: str) -> None:
    # "claudy -x" parses as an option, so such a workspace could never be launched.
    if name.startswith("-"):
        raise InvalidWorkspaceNameError(name)


def _unique(paths: Iterable[str], *, exclude: str) -> list[str]:
    """Drop duplicates and ``exclude``, keeping first-seen order."""
    return [p for p in dict.fromkeys(paths) if p != exclude]


class WorkspaceRegistry:
    """Ordered list of workspaces backed by a ``WorkspaceStore``."""

    def __init__(self, store: WorkspaceStore) -> None:
        self._store = store
        self.config: WorkspaceConfig = store.load()

    @property
    def workspaces(self) -> list[Workspace]:
        return self.config.workspaces

    def save(self) -> None:
        self._store.save(self.config)

    # -- Lookup ----------------------------------------------------------------

    def find_by_name(self, name: str) -> Workspace | None:
        """Case-insensitive exact match on name."""
        key = name.lower()
        return next((w for w in self.workspaces if w.name.lower() == key), None)

    def find_by_cwd(self, path: str) -> Workspace | None:
        """Exact match on the canonical working directory."""
        return next((w for w in self.workspaces if w.cwd == path), None)

    def index_of(self, name: str) -> int:
        """Position of the named workspace.  Raises ``WorkspaceNotFoundError``."""
        key = name.lower()
        for i, workspace in enumerate(self.workspaces):
            if workspace.name.lower() == key:
                return i
        raise WorkspaceNotFoundError(name)

    def get(self, name: str) -> Workspace:
        return self.workspaces[self.index_of(name)]

    def require_any(self) -> None:
        """Raise ``NoWorkspacesError`` if the registry is empty."""
        if not self.workspaces:
            raise NoWorkspacesError

    # -- Create / delete -------------------------------------------------------

    def build(
        self,
        name: str | None = None,
        cwd: str | None = None,
        add_dirs: Iterable[str] = (),
        description: str | None = None,
    ) -> Workspace:
        """Validate inputs and return a new, unsaved workspace.

        ``cwd`` defaults to the current directory and ``name`` to its last
        path segment.  Extra directories are resolved, de-duplicated and any
        entry equal to ``cwd`` is dropped.
        """
        resolved_cwd = resolve_path(cwd)
        name = name or os.path.basename(resolved_cwd) or resolved_cwd
        extra = _unique((resolve_path(d) for d in add_dirs), exclude=resolved_cwd)

        if not exists(resolved_cwd):
            raise DirectoryNotFoundError(resolved_cwd)
        _check_name(name)
        if self.find_by_name(name) is not None:
            raise DuplicateWorkspaceError(name)
        owner = self.find_by_cwd(resolved_cwd)
        if owner is not None:
            raise DirectoryInUseError(resolved_cwd, owner.name)
        for directory in extra:
            if not exists(directory):
                raise DirectoryNotFoundError(directory)

        return Workspace(
            name=name,
            description=description or name,
            cwd=resolved_cwd,
            add_dirs=extra,
        )

    def add(self, workspace: Workspace) -> Workspace:
        self.workspaces.append(workspace)
        self.save()
        return workspace

    def create(
        self,
        name: str | None = None,
        cwd: str | None = None,
        add_dirs: Iterable[str] = (),
        description: str | None = None,
    ) -> Workspace:
        """``build`` followed by ``add``."""
        return self.add(self.build(name, cwd, add_dirs, description))

    def remove(self, index: int) -> Workspace:
        """Delete the workspace at ``index`` and return it."""
        workspace = self.workspaces.pop(index)
        self.save()
        return workspace

    # -- Field edits -----------------------------------------------------------

    def rename(self, workspace: Workspace, new_name: str) -> bool:
        """Rename ``workspace``.  Empty or unchanged input is a no-op.

        Raises ``DuplicateWorkspaceError`` if another workspace already uses
        the name (case-insensitive).  Returns whether anything changed.
        """
        if not new_name or new_name == workspace.name:
            return False
        _check_name(new_name)
        other = self.find_by_name(new_name)
        if other is not None and other is not workspace:
            raise DuplicateWorkspaceError(new_name)
        workspace.name = new_name
        self.save()
        return True

    def set_description(self, workspace: Workspace, description: str) -> bool:
        """Empty input means "keep the current description", never "clear"."""
        if not description:
            return False
        workspace.description = description
        self.save()
        return True

    def change_cwd(self, workspace: Workspace, value: str) -> bool:
        """Move ``workspace`` to a new working directory.

        Extra directories equal to the new ``cwd`` are pruned.
        """
        if not value:
            return False
        path = resolve_path(value)
        if not exists(path):
            raise DirectoryNotFoundError(path, label="Not found")
        owner = self.find_by_cwd(path)
        if owner is not None and owner is not workspace:
            raise DirectoryInUseError(path, owner.name)
        workspace.cwd = path
        workspace.add_dirs = [d for d in workspace.extra_dirs if d != path]
        self.save()
        return True

    def add_dir(self, workspace: Workspace, value: str) -> bool:
        if not value:
            return False
        path = resolve_path(value)
        if not exists(path):
            raise DirectoryNotFoundError(path, label="Not found")
        if path == workspace.cwd:
            raise SameAsWorkingDirectoryError(path)
        if path in workspace.extra_dirs:
            raise DirectoryAlreadyAddedError(path)
        workspace.add_dirs = [*workspace.extra_dirs, path]
        self.save()
        return True

    def remove_dir(self, workspace: Workspace, index: int) -> str | None:
        """Remove the extra directory at ``index``.  No-op when there are none."""
        dirs = workspace.extra_dirs
        if not dirs:
            return None
        removed = dirs.pop(index)
        workspace.add_dirs = dirs
        self.save()
        return removed

    def clear_dirs(self, workspace: Workspace) -> bool:
        if not workspace.extra_dirs:
            return False
        workspace.add_dirs = None
        self.save()
        return True
