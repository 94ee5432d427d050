"""
Fragment models — the declaration of a group of tool wrappers.

A fragment bundles the wrappers for one external tool (or one family
of tools). It is pure data: the fragment registry decides whether the
wrappers get registered, based on command availability.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class RegistrationMode(StrEnum):
    """How a fragment reacts to missing commands at load time."""

    CONDITIONAL = "conditional"   # register only if every required command exists
    ALWAYS = "always"             # register anyway, check again at call time


class WrapperSpec(BaseModel):
    """A thin wrapper: a name that forwards its arguments to a command."""

    name: str
    command: str
    args: list[str] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)
    description: str = ""

    @field_validator("name", "command")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    def argv(self, extra: list[str] | tuple[str, ...] = ()) -> list[str]:
        """Full argument vector for an invocation with ``extra`` args."""
        return [self.command, *self.args, *extra]


class Fragment(BaseModel):
    """A named group of wrappers for one tool."""

    name: str
    description: str = ""
    requires: list[str] = Field(default_factory=list)
    wrappers: list[WrapperSpec] = Field(default_factory=list)
    registration: RegistrationMode | None = None  # None → registry default

    def required_commands(self) -> list[str]:
        """Commands that must exist for this fragment to register.

        Falls back to the distinct commands its wrappers call.
        """
        if self.requires:
            return list(dict.fromkeys(self.requires))
        return list(dict.fromkeys(w.command for w in self.wrappers))
