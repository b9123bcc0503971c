"""User-facing terminal output.

Two severities exist: ``die`` prints in red and exits with status 1,
``warn`` prints in yellow and returns so the caller can carry on.
"""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from claudy.models.workspace import Workspace

LOGO = "\n".join(
    [
        "",
        click.style(" ▐▛███▜▌ ", fg=27) + click.style(" ▐▛███▜▌ ", fg=39) + click.style(" ▐▛███▜▌", fg=117),
        click.style("▝▜█████▛▘", fg=27) + click.style("▝▜█████▛▘", fg=39) + click.style("▝▜█████▛▘", fg=117),
        click.style("  ▘▘ ▝▝  ", fg=27) + click.style("  ▘▘ ▝▝  ", fg=39) + click.style("  ▘▘ ▝▝", fg=117),
        click.style("Claude Code Workspace Manager", dim=True),
    ]
)


def ok(message: str) -> None:
    click.secho(f"\n✓ {message}\n", fg="green")


def warn(message: str, indent: str = "  ") -> None:
    click.secho(f"{indent}⚠️  {message}", fg="yellow", err=True)


def die(message: str) -> NoReturn:
    click.secho(f"\n✗ {message}\n", fg="red", err=True)
    sys.exit(1)


def print_workspace(workspace: Workspace, indent: str = "") -> None:
    """Print name, description, working dir and each additional dir."""
    click.echo(f"{indent}{workspace.name} - {workspace.description}")
    click.echo(f"{indent}  📁 {workspace.cwd}")
    for directory in workspace.extra_dirs:
        click.echo(f"{indent}  📂 {directory}")


def done(message: str, indent: str = "  ") -> None:
    """Inline success note used inside interactive loops."""
    click.secho(f"{indent}✓ {message}", fg="green")
