"""Claudy - Claude Code workspace manager."""

__version__ = "1.0.0"
