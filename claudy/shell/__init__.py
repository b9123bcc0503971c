"""Interactive menus and the flows built on them."""

from claudy.shell.prompts import ClickPrompter, Option, Prompter

__all__ = ["ClickPrompter", "Option", "Prompter"]
