"""Domain errors.

Every failure a command can report derives from ``ClaudyError``.  The CLI
turns an escaping ``ClaudyError`` into a fatal message; the interactive edit
loop shows the same errors as warnings and keeps going.
"""

from __future__ import annotations


class ClaudyError(Exception):
    """Base class for user-facing failures."""


class DirectoryNotFoundError(ClaudyError, FileNotFoundError):
    """A directory given by the user (or stored in a workspace) is missing."""

    def __init__(self, path: str, label: str = "Directory not found") -> None:
        super().__init__(f"{label}: {path}")
        self.path = path


class DuplicateWorkspaceError(ClaudyError, ValueError):
    """A workspace with the same name (case-insensitive) already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Workspace "{name}" already exists')
        self.name = name


class DirectoryInUseError(ClaudyError, ValueError):
    """The directory is already the working directory of another workspace."""

    def __init__(self, path: str, owner: str) -> None:
        super().__init__(f'Directory already registered as "{owner}"')
        self.path = path
        self.owner = owner


class WorkspaceNotFoundError(ClaudyError, LookupError):
    """No workspace matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Workspace "{name}" not found')
        self.name = name


class NoWorkspacesError(ClaudyError, LookupError):
    """The operation needs at least one workspace and the registry is empty."""

    def __init__(self) -> None:
        super().__init__("No workspaces configured")


class SameAsWorkingDirectoryError(ClaudyError, ValueError):
    """An additional directory equals the workspace's working directory."""

    def __init__(self, path: str) -> None:
        super().__init__("Same as working directory")
        self.path = path


class DirectoryAlreadyAddedError(ClaudyError, ValueError):
    """An additional directory is already part of the workspace."""

    def __init__(self, path: str) -> None:
        super().__init__("Already added")
        self.path = path


class ExecutableNotFoundError(ClaudyError, FileNotFoundError):
    """The external program could not be started."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"Command not found: {binary} (is it installed and on PATH?)")
        self.binary = binary


class LaunchError(ClaudyError, OSError):
    """The external program exists but could not be started."""

    def __init__(self, binary: str, reason: str) -> None:
        super().__init__(f"Cannot launch {binary}: {reason}")
        self.binary = binary
        self.reason = reason


class InvalidWorkspaceNameError(ClaudyError, ValueError):
    """The name could not be used to launch the workspace from the command line."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Invalid workspace name "{name}" (must not start with "-")')
        self.name = name
