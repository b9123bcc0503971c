"""Launch Claude Code, optionally inside a workspace.

The child inherits stdin/stdout/stderr and owns the terminal until it exits.
While waiting, this process ignores SIGINT so Ctrl-C reaches only the child.
The caller exits with the returned code.
"""

from __future__ import annotations

import signal
import subprocess
from collections.abc import Callable, Sequence

import click
from loguru import logger

from claudy.console import print_workspace
from claudy.errors import DirectoryNotFoundError, ExecutableNotFoundError, LaunchError
from claudy.models.workspace import Workspace
from claudy.paths import exists

ADD_DIR_FLAG = "--add-dir"

Spawn = Callable[[Sequence[str], str | None], int | None]


def build_command(binary: str, workspace: Workspace | None = None) -> list[str]:
    """``[binary, --add-dir, d1, --add-dir, d2, ...]`` in stored order."""
    argv = [binary]
    if workspace is not None:
        for directory in workspace.extra_dirs:
            argv += [ADD_DIR_FLAG, directory]
    return argv


def validate_paths(workspace: Workspace) -> None:
    """Re-check directories that may have been deleted since registration."""
    if not exists(workspace.cwd):
        raise DirectoryNotFoundError(workspace.cwd, label="Working directory not found")
    for directory in workspace.extra_dirs:
        if not exists(directory):
            raise DirectoryNotFoundError(directory, label="Additional directory not found")


def spawn_inherited(argv: Sequence[str], cwd: str | None) -> int | None:
    """Run ``argv`` attached to this terminal and wait for it."""
    proc = subprocess.Popen(list(argv), cwd=cwd)  # noqa: S603
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        return proc.wait()
    finally:
        signal.signal(signal.SIGINT, previous)


def exit_code(returncode: int | None) -> int:
    """Map a child return code to our own exit status.

    Signal-terminated children (negative codes) follow the shell convention
    ``128 + signum``; an unknown code counts as success.
    """
    if returncode is None:
        return 0
    if returncode < 0:
        return 128 - returncode
    return returncode


def launch(binary: str, workspace: Workspace | None = None, spawn: Spawn = spawn_inherited) -> int:
    """Start ``binary`` (bare or in ``workspace``) and return its exit code.

    Raises ``DirectoryNotFoundError`` before spawning if the workspace's
    directories are gone, ``ExecutableNotFoundError`` if ``binary`` is not
    installed, and ``LaunchError`` for any other OS-level start failure.
    """
    if workspace is None:
        click.echo("\n✨ Launching Claude...\n")
        cwd = None
    else:
        validate_paths(workspace)
        click.echo(f"\n✨ Launching {workspace.name}...\n")
        print_workspace(workspace, "   ")
        click.echo()
        cwd = workspace.cwd

    argv = build_command(binary, workspace)
    logger.debug("Spawning {} (cwd={})", argv, cwd)
    try:
        returncode = spawn(argv, cwd)
    except FileNotFoundError:
        raise ExecutableNotFoundError(binary) from None
    except OSError as exc:
        raise LaunchError(binary, exc.strerror or str(exc)) from exc

    code = exit_code(returncode)
    logger.debug("{} exited with {}", binary, code)
    return code
