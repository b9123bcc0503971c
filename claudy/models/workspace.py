"""Workspace data model.

A workspace is a named working directory plus optional extra directories
handed to Claude Code as ``--add-dir`` flags.  The whole registry is stored
as one JSON document::

    { "workspaces": [ { "name": ..., "description": ..., "cwd": ..., "addDirs": [...] } ] }

``addDirs`` is omitted when empty.  The model never holds an empty list: both
construction and attribute assignment collapse ``[]`` to ``None``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Workspace(BaseModel):
    """One registry entry."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    name: str = Field(min_length=1)
    description: str = ""
    cwd: str
    add_dirs: list[str] | None = Field(default=None, alias="addDirs")

    @model_validator(mode="before")
    @classmethod
    def _default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("description") is None and data.get("name"):
            data = {**data, "description": data["name"]}
        return data

    @field_validator("add_dirs")
    @classmethod
    def _absent_when_empty(cls, value: list[str] | None) -> list[str] | None:
        return value or None

    @property
    def extra_dirs(self) -> list[str]:
        """Additional directories, ``[]`` when none are configured."""
        return list(self.add_dirs or [])


class WorkspaceConfig(BaseModel):
    """The persisted document: an ordered list of workspaces."""

    workspaces: list[Workspace] = Field(default_factory=list)

    def dump_json(self) -> str:
        """Serialise as 2-space indented JSON with a trailing newline."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True) + "\n"
