"""Line model: classification of one profile line.

Every line of a profile is exactly one :class:`Content` variant:

* :class:`Blank` -- the empty line.
* :class:`Comment` -- ``#`` followed by free text.
* :class:`ConditionalLine` -- a :class:`~fjp.profile.conditional.Conditional`.
* :class:`CommandLine` -- a :class:`~fjp.profile.command.Command`.
* :class:`Invalid` -- anything else, kept verbatim together with the
  :class:`~fjp.core.errors.ErrorKind` that explains the failure.

:func:`parse_content` never raises on input text: a line that fails to
classify *is* an ``Invalid`` value, so a caller can always store the
result and move on to the next line.

Content values are immutable and compare by value; a :class:`Line` adds
the (optional) line number the content was read from.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fjp.core.errors import ErrorKind, ProfileSyntaxError
from fjp.profile.command import Command
from fjp.profile.conditional import Conditional


class Content(ABC):
    """Base class of the per-line classifications."""

    __slots__ = ()

    is_valid: bool = True

    @abstractmethod
    def text(self) -> str:
        """Return the line as profile text, without newline."""

    def format(self) -> str:
        """Return the line as profile text, with its trailing newline."""
        return self.text() + "\n"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True)
class Blank(Content):
    def text(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class Comment(Content):
    """A comment; :attr:`comment` is everything after the leading ``#``."""

    comment: str

    def text(self) -> str:
        return f"#{self.comment}"


@dataclass(frozen=True, slots=True)
class ConditionalLine(Content):
    conditional: Conditional

    def text(self) -> str:
        return self.conditional.format()


@dataclass(frozen=True, slots=True)
class CommandLine(Content):
    command: Command

    def text(self) -> str:
        return self.command.format()


@dataclass(frozen=True, slots=True)
class Invalid(Content):
    """An unrecognised line, preserved exactly as it was read."""

    original: str
    kind: ErrorKind

    is_valid = False

    def text(self) -> str:
        return self.original


def parse_content(line: str) -> Content:
    """Classify a single line (without its newline).

    Classification order: empty line, ``#`` comment, ``?`` conditional,
    command.  Conditional and command failures become :class:`Invalid`.
    """
    if line == "":
        return Blank()
    if line.startswith("#"):
        return Comment(line[1:])
    try:
        if line.startswith("?"):
            return ConditionalLine(Conditional.parse(line))
        return CommandLine(Command.parse(line))
    except ProfileSyntaxError as exc:
        return Invalid(line, exc.kind)


@dataclass(slots=True)
class Line:
    """One entry of a :class:`~fjp.profile.stream.ProfileStream`.

    ``lineno`` is 0-based, or ``None`` once the numbering no longer refers
    to a single source file.
    """

    lineno: int | None
    content: Content

    @property
    def is_blank(self) -> bool:
        return isinstance(self.content, Blank)

    @property
    def is_comment(self) -> bool:
        return isinstance(self.content, Comment)

    @property
    def is_command(self) -> bool:
        return isinstance(self.content, CommandLine)

    @property
    def is_conditional(self) -> bool:
        return isinstance(self.content, ConditionalLine)

    @property
    def is_invalid(self) -> bool:
        return isinstance(self.content, Invalid)

    def format(self) -> str:
        return self.content.format()
