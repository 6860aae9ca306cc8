"""Conditional lines: a command guarded by a runtime feature check.

A conditional is written ``?GUARD: command``, e.g. ``?HAS_X11: noroot``.
firejail applies the command only when the guard holds at start-up.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass

from fjp.core.errors import BadCondition, EmptyCondition
from fjp.profile.command import Command


class Guard(enum.StrEnum):
    """Known guard keywords, valued by their profile text."""

    ALLOW_TRAY = "?ALLOW_TRAY:"
    BROWSER_ALLOW_DRM = "?BROWSER_ALLOW_DRM:"
    BROWSER_DISABLE_U2F = "?BROWSER_DISABLE_U2F:"
    HAS_APPIMAGE = "?HAS_APPIMAGE:"
    HAS_NET = "?HAS_NET:"
    HAS_NODBUS = "?HAS_NODBUS:"
    HAS_NOSOUND = "?HAS_NOSOUND:"
    HAS_PRIVATE = "?HAS_PRIVATE:"
    HAS_X11 = "?HAS_X11:"


@dataclass(frozen=True, slots=True)
class Conditional:
    """Exactly one :class:`Command` behind a :class:`Guard`."""

    guard: Guard
    command: Command

    @classmethod
    def parse(cls, line: str) -> Conditional:
        """Parse ``?GUARD: command``.

        Raises
        ------
        EmptyCondition
            Nothing follows the guard.
        BadCondition
            The guard keyword is unknown.
        ProfileSyntaxError
            Whatever :meth:`Command.parse` raises for the guarded command.
        """
        guard_text, _, command_text = line.partition(" ")
        if not command_text:
            raise EmptyCondition(details={"guard": guard_text})
        try:
            guard = Guard(guard_text)
        except ValueError:
            raise BadCondition(details={"guard": guard_text}) from None
        return cls(guard, Command.parse(command_text))

    def format(self) -> str:
        return f"{self.guard.value} {self.command.format()}"

    def __str__(self) -> str:
        return self.format()
