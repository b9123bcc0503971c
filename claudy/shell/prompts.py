"""Prompt and selection primitives.

Flows talk to the terminal only through the ``Prompter`` protocol:

- ``select`` shows labelled options and returns the chosen index, or ``None``
  when the user backs out.
- ``prompt`` asks for free text and returns it trimmed (possibly empty), or
  ``None`` when the user backs out.

``ClickPrompter`` is the terminal implementation; tests use a scripted fake.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import click

CANCEL_KEYS = ("q", "quit")


@dataclass(frozen=True)
class Option:
    text: str
    description: str = ""


@runtime_checkable
class Prompter(Protocol):
    def select(self, options: Sequence[Option], header: str = "") -> int | None: ...

    def prompt(self, message: str) -> str | None: ...


class ClickPrompter:
    """Numbered menus and line prompts on top of ``click.prompt``.

    Ctrl-C and end-of-input raise ``click.Abort`` inside click; both are
    reported as a cancelled answer.
    """

    def select(self, options: Sequence[Option], header: str = "") -> int | None:
        if not options:
            return None

        if header:
            click.echo(header)
        width = max(len(o.text) for o in options)
        for i, option in enumerate(options, start=1):
            line = f"  {i:>2}) {option.text.ljust(width)}"
            if option.description:
                line += "  " + click.style(option.description, dim=True)
            click.echo(line)

        hint = f"  Select [1-{len(options)}, q to cancel]"
        while True:
            try:
                raw = click.prompt(hint, default="", show_default=False)
            except click.Abort:
                click.echo()
                return None

            raw = raw.strip().lower()
            if raw in CANCEL_KEYS:
                return None
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return int(raw) - 1
            if raw:
                click.secho(f"  Enter a number between 1 and {len(options)}", fg="yellow", err=True)

    def prompt(self, message: str) -> str | None:
        try:
            value = click.prompt(message, default="", show_default=False, prompt_suffix="")
        except click.Abort:
            click.echo()
            return None
        return value.strip()
