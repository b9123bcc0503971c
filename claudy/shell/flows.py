"""Interactive flows: add, edit, remove, list and the top-level selector.

Flows receive a loaded ``WorkspaceRegistry`` and a ``Prompter``.  A ``None``
answer from the prompter abandons the current flow; nothing is saved unless
a registry mutation already succeeded.

Errors that should end the command (missing directory on add, unknown name,
empty registry) propagate as ``ClaudyError``.  Inside the edit loop the same
errors are shown as warnings and the loop continues.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum, StrEnum

import click
from loguru import logger

from claudy.console import LOGO, done, ok, print_workspace, warn
from claudy.errors import ClaudyError
from claudy.managers.workspaces import WorkspaceRegistry
from claudy.models.workspace import Workspace
from claudy.shell.prompts import Option, Prompter


@dataclass(frozen=True)
class LaunchTarget:
    """What the selector asked to launch.  ``workspace=None`` means bare."""

    workspace: Workspace | None = None


# ---------------------------------------------------------------------------
# Add / remove / list
# ---------------------------------------------------------------------------


def add_workspace(registry: WorkspaceRegistry, prompter: Prompter, args: Sequence[str] = ()) -> Workspace | None:
    """``claudy add [name] [cwd] [dirs...]``.

    Without arguments the current directory is offered interactively: the
    user can type a description, sees a preview and confirms.  With
    arguments the workspace is validated and saved straight away.
    """
    interactive = not args
    name = args[0] if args else None
    cwd = args[1] if len(args) > 1 else None
    workspace = registry.build(name or None, cwd or None, args[2:])

    if interactive:
        click.echo(f"\n📁 {workspace.cwd}\n")
        description = prompter.prompt(f"  Description [{workspace.name}]: ")
        if description is None:
            return None
        if description:
            workspace.description = description

        click.echo()
        print_workspace(workspace, "  ")
        if prompter.select([Option("Save"), Option("Cancel")], "\n  Confirm?") != 0:
            return None

    registry.add(workspace)
    logger.debug("Added workspace {} at {}", workspace.name, workspace.cwd)
    ok(f'Added "{workspace.name}"')
    return workspace


def _pick_workspace(registry: WorkspaceRegistry, prompter: Prompter, header: str) -> int | None:
    options = [Option(w.name, w.cwd) for w in registry.workspaces]
    return prompter.select(options, header)


def remove_workspace(registry: WorkspaceRegistry, prompter: Prompter, name: str | None = None) -> Workspace | None:
    """``claudy rm [name]``.  The picker path asks for confirmation."""
    registry.require_any()

    if name:
        index = registry.index_of(name)
    else:
        index = _pick_workspace(registry, prompter, "🗑️  Select workspace to delete:")
        if index is None:
            return None
        target = registry.workspaces[index]
        if prompter.select([Option("Delete"), Option("Cancel")], f'\n  Delete "{target.name}"?') != 0:
            return None

    removed = registry.remove(index)
    ok(f'Deleted "{removed.name}"')
    return removed


def list_workspaces(registry: WorkspaceRegistry) -> None:
    if not registry.workspaces:
        click.echo("\n📭 No workspaces configured")
        click.echo(f"   Run {click.style('claudy add', fg='cyan')} to create one\n")
        return

    click.echo()
    for workspace in registry.workspaces:
        print_workspace(workspace, "  ")
        click.echo()


# ---------------------------------------------------------------------------
# Edit
# ---------------------------------------------------------------------------


class EditField(IntEnum):
    """Rows of the field menu, in display order."""

    NAME = 0
    DESCRIPTION = 1
    WORKING_DIR = 2
    ADD_DIRS = 3
    DONE = 4


class EditState(StrEnum):
    SELECT_FIELD = "select_field"
    MUTATE = "mutate"
    DONE = "done"


class DirAction(IntEnum):
    ADD = 0
    REMOVE = 1
    CLEAR = 2
    BACK = 3


def _field_options(workspace: Workspace) -> list[Option]:
    dirs = workspace.extra_dirs
    return [
        Option("Name", workspace.name),
        Option("Description", workspace.description),
        Option("Working dir", workspace.cwd),
        Option("Additional dirs", f"{len(dirs)} configured" if dirs else "(none)"),
        Option("Done", "Save and exit"),
    ]


def _edit_name(registry: WorkspaceRegistry, prompter: Prompter, workspace: Workspace) -> None:
    value = prompter.prompt(f"  New name [{workspace.name}]: ")
    if value is not None:
        registry.rename(workspace, value)


def _edit_description(registry: WorkspaceRegistry, prompter: Prompter, workspace: Workspace) -> None:
    value = prompter.prompt(f"  New description [{workspace.description}]: ")
    if value is not None:
        registry.set_description(workspace, value)


def _edit_working_dir(registry: WorkspaceRegistry, prompter: Prompter, workspace: Workspace) -> None:
    value = prompter.prompt(f"  New working dir [{workspace.cwd}]: ")
    if value is not None:
        registry.change_cwd(workspace, value)


def _edit_add_dirs(registry: WorkspaceRegistry, prompter: Prompter, workspace: Workspace) -> None:
    action = prompter.select(
        [
            Option("Add", "Add a directory"),
            Option("Remove", "Remove a directory"),
            Option("Clear", "Remove all"),
            Option("Back"),
        ],
        "  Additional directories:",
    )

    if action == DirAction.ADD:
        value = prompter.prompt("  Path: ")
        if value and registry.add_dir(workspace, value):
            done("Added")
    elif action == DirAction.REMOVE:
        dirs = workspace.extra_dirs
        if not dirs:
            warn("No directories to remove")
            return
        index = prompter.select([Option(os.path.basename(d) or d, d) for d in dirs], "  Select to remove:")
        if index is not None and registry.remove_dir(workspace, index) is not None:
            done("Removed")
    elif action == DirAction.CLEAR:
        if registry.clear_dirs(workspace):
            done("Cleared all")


_EDITORS: dict[EditField, Callable[[WorkspaceRegistry, Prompter, Workspace], None]] = {
    EditField.NAME: _edit_name,
    EditField.DESCRIPTION: _edit_description,
    EditField.WORKING_DIR: _edit_working_dir,
    EditField.ADD_DIRS: _edit_add_dirs,
}


def edit_workspace(registry: WorkspaceRegistry, prompter: Prompter, name: str | None = None) -> Workspace | None:
    """``claudy edit [name]``: redisplay the field menu until Done or cancel.

    Each field change is saved as soon as it succeeds.  Rejected changes
    (name or directory collisions, missing paths) are warnings.
    """
    registry.require_any()

    if name:
        index = registry.index_of(name)
    else:
        index = _pick_workspace(registry, prompter, "✏️  Select workspace to edit:")
        if index is None:
            return None
    workspace = registry.workspaces[index]

    state = EditState.SELECT_FIELD
    field = EditField.DONE
    while state is not EditState.DONE:
        if state is EditState.SELECT_FIELD:
            choice = prompter.select(_field_options(workspace), f'\n✏️  Editing "{workspace.name}":')
            if choice is None or choice == EditField.DONE:
                state = EditState.DONE
            else:
                field = EditField(choice)
                state = EditState.MUTATE
        else:
            try:
                _EDITORS[field](registry, prompter, workspace)
            except ClaudyError as exc:
                warn(str(exc))
            state = EditState.SELECT_FIELD

    return workspace


# ---------------------------------------------------------------------------
# Top-level selector
# ---------------------------------------------------------------------------


class ManageAction(IntEnum):
    ADD = 0
    EDIT = 1
    DELETE = 2
    LIST = 3


def _manage(registry: WorkspaceRegistry, prompter: Prompter) -> None:
    action = prompter.select(
        [
            Option("Add", "Add new workspace"),
            Option("Edit", "Edit workspace"),
            Option("Delete", "Delete workspace"),
            Option("List", "List all workspaces"),
        ],
        "⚙️  Manage workspaces:",
    )
    if action == ManageAction.ADD:
        add_workspace(registry, prompter)
    elif action == ManageAction.EDIT:
        edit_workspace(registry, prompter)
    elif action == ManageAction.DELETE:
        remove_workspace(registry, prompter)
    elif action == ManageAction.LIST:
        list_workspaces(registry)


def run_selector(registry: WorkspaceRegistry, prompter: Prompter) -> LaunchTarget | None:
    """``claudy`` with no arguments.

    Returns what to launch, or ``None`` when the user cancelled or picked a
    management action instead.
    """
    if not registry.workspaces:
        click.echo(LOGO)
        click.echo("  No workspaces configured yet.\n")
        choice = prompter.select(
            [
                Option("Add workspace", "Add current directory"),
                Option("Launch Claude", "Without workspace"),
            ],
            "  What would you like to do?",
        )
        if choice == 0:
            add_workspace(registry, prompter)
        elif choice == 1:
            return LaunchTarget()
        return None

    workspaces = list(registry.workspaces)
    options = [Option(w.name, w.description) for w in workspaces]
    options += [
        Option("Claude", "Launch without workspace"),
        Option("Manage", "Add, edit, delete"),
    ]

    click.echo(LOGO)
    choice = prompter.select(options)
    if choice is None:
        return None
    if choice < len(workspaces):
        return LaunchTarget(workspaces[choice])
    if choice == len(workspaces):
        return LaunchTarget()

    _manage(registry, prompter)
    return None
