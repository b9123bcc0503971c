from __future__ import annotations

from dataclasses import dataclass, field

import click

from claudy import __version__
from claudy.console import die
from claudy.errors import ClaudyError
from claudy.launcher import Spawn, launch, spawn_inherited
from claudy.log import setup_logging
from claudy.managers.workspaces import WorkspaceRegistry
from claudy.models.workspace import Workspace
from claudy.settings import ClaudySettings, get_settings
from claudy.shell.flows import add_workspace, edit_workspace, list_workspaces, remove_workspace, run_selector
from claudy.shell.prompts import ClickPrompter, Prompter
from claudy.store.local import LocalConfigStore

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = """\b
Examples:
  claudy add                  Add current directory interactively
  claudy add myapp            Add current dir as "myapp"
  claudy add myapp ~/proj     Add ~/proj as "myapp"
  claudy add myapp ~/proj ~/lib
                              Add with additional directory
  claudy myapp                Launch "myapp" workspace

\b
Config:
  ~/.config/claudy/workspaces.json (override with CLAUDY_CONFIG_DIR)
"""


@dataclass
class App:
    """Per-invocation dependencies, carried on ``ctx.obj``."""

    settings: ClaudySettings
    prompter: Prompter = field(default_factory=ClickPrompter)
    spawn: Spawn = spawn_inherited

    def registry(self) -> WorkspaceRegistry:
        """Load a fresh registry from the configured file."""
        return WorkspaceRegistry(LocalConfigStore(self.settings.config_file))


def _launch(ctx: click.Context, workspace: Workspace | None = None) -> None:
    app: App = ctx.obj
    code = launch(app.settings.claude_bin, workspace, spawn=app.spawn)
    ctx.exit(code)


class WorkspaceGroup(click.Group):
    """Command group where an unknown command name launches that workspace.

    Also resolves command aliases and turns any escaping ``ClaudyError`` into
    a fatal message with exit status 1.
    """

    aliases = {"delete": "rm", "list": "ls", "init": "add"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            return args[0], launch_workspace, args
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except ClaudyError as exc:
            die(str(exc))


@click.group(
    cls=WorkspaceGroup,
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
    epilog=EPILOG,
)
@click.version_option(__version__, "-v", "--version", prog_name="claudy", message="%(prog)s v%(version)s")
@click.pass_context
def main(ctx: click.Context) -> None:
    """Claudy - Claude Code Workspace Manager.

    Run without arguments for the interactive workspace selector, or pass a
    workspace name to launch it directly.
    """
    if ctx.obj is None:
        ctx.obj = App(settings=get_settings())
    app: App = ctx.obj
    setup_logging(app.settings.log_level)

    if ctx.invoked_subcommand is None:
        target = run_selector(app.registry(), app.prompter)
        if target is not None:
            _launch(ctx, target.workspace)


@click.command("launch", hidden=True, context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.argument("rest", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def launch_workspace(ctx: click.Context, name: str, rest: tuple[str, ...]) -> None:
    """Launch the named workspace.  Words after the name are ignored."""
    app: App = ctx.obj
    _launch(ctx, app.registry().get(name))


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.argument("cwd", required=False)
@click.argument("dirs", nargs=-1)
@click.pass_obj
def add(app: App, name: str | None, cwd: str | None, dirs: tuple[str, ...]) -> None:
    """Add a workspace (alias: init).

    Interactive when called without arguments: registers the current
    directory after asking for a description.
    """
    args = [a for a in (name, cwd) if a is not None] + list(dirs)
    add_workspace(app.registry(), app.prompter, args)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_obj
def rm(app: App, name: str | None) -> None:
    """Remove a workspace (alias: delete)."""
    remove_workspace(app.registry(), app.prompter, name)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_obj
def edit(app: App, name: str | None) -> None:
    """Edit a workspace's fields."""
    edit_workspace(app.registry(), app.prompter, name)


@main.command(context_settings=CONTEXT_SETTINGS)
@click.pass_obj
def ls(app: App) -> None:
    """List all workspaces (alias: list)."""
    list_workspaces(app.registry())


@main.command("help")
@click.pass_context
def help_(ctx: click.Context) -> None:
    """Show this message."""
    click.echo(ctx.parent.get_help())


if __name__ == "__main__":
    main()
