"""Stream model: a whole profile as an ordered sequence of lines.

:class:`ProfileStream` owns parsing a profile's full text, formatting it
back, value-based containment queries (the basis of profile diffs) and
aggregation of invalid lines.

Parsing always produces a fully populated stream.  Invalid lines are
kept in place as :class:`~fjp.profile.content.Invalid` values, so the
formatted stream reproduces the input even when parts of it are garbage.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import overload

from fjp.core.errors import InvalidProfile
from fjp.profile.content import Content, Invalid, Line, parse_content
from fjp.profile.report import InvalidLineReport, ParseReport

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split *text* into lines.

    Lines end at ``\\n``; one ``\\r`` before it is dropped, and a final
    newline does not start another (empty) line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class ProfileStream:
    """An ordered, file-ordered sequence of :class:`Line` objects.

    Parameters
    ----------
    lines:
        Initial lines, kept in the given order.  Each stream holds its own
        :class:`Line` objects, so line numbers are never shared with another
        stream; the (immutable) contents are shared.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[Line] = ()) -> None:
        self._lines: list[Line] = [replace(line) for line in lines]

    # -- Construction ----------------------------------------------------

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> ProfileStream:
        """Parse the full text of one profile.

        Every line is classified and numbered from 0.  The stream is
        complete even if some lines are invalid; check :meth:`has_errors`.

        Parameters
        ----------
        text:
            Profile text as read from the file.
        strict:
            If ``True``, raise :class:`InvalidProfile` when any line is
            invalid.  The exception's ``stream`` attribute holds the same
            populated stream that would have been returned.
        """
        stream = cls(
            Line(lineno, parse_content(raw))
            for lineno, raw in enumerate(split_lines(text))
        )
        invalid = sum(1 for line in stream if line.is_invalid)
        logger.debug("Parsed profile: %d lines, %d invalid", len(stream), invalid)
        if strict and invalid:
            raise InvalidProfile(stream)
        return stream

    # -- Queries ---------------------------------------------------------

    def contains(self, item: Content | Line) -> bool:
        """Return ``True`` if any line's content equals *item*'s content.

        Comparison is by value; line numbers are ignored.
        """
        content = item.content if isinstance(item, Line) else item
        return any(line.content == content for line in self._lines)

    def has_errors(self) -> bool:
        """Return ``True`` if at least one line is invalid."""
        return any(line.is_invalid for line in self._lines)

    def errors(self) -> ProfileStream:
        """Return a new stream holding only the invalid lines."""
        return ProfileStream(line for line in self._lines if line.is_invalid)

    def report(self) -> ParseReport:
        """Summarise the invalid lines for display or serialisation."""
        errors: list[InvalidLineReport] = []
        for line in self._lines:
            if isinstance(line.content, Invalid):
                errors.append(
                    InvalidLineReport(
                        lineno=line.lineno,
                        text=line.content.original,
                        code=line.content.kind.code,
                        message=line.content.kind.message,
                    )
                )
        return ParseReport(
            valid=not errors,
            line_count=len(self._lines),
            errors=errors,
        )

    # -- Line numbers ----------------------------------------------------

    def strip_lineno(self) -> None:
        """Forget all line numbers (before merging lines from several files)."""
        for line in self._lines:
            line.lineno = None

    def rewrite_lineno(self) -> None:
        """Renumber lines by their current position."""
        for index, line in enumerate(self._lines):
            line.lineno = index

    # -- Sequence protocol -----------------------------------------------

    def append(self, line: Line) -> None:
        self._lines.append(replace(line))

    def extend(self, lines: Iterable[Line]) -> None:
        self._lines.extend([replace(line) for line in lines])

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (Content, Line)):
            return False
        return self.contains(item)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @overload
    def __getitem__(self, index: int) -> Line: ...

    @overload
    def __getitem__(self, index: slice) -> ProfileStream: ...

    def __getitem__(self, index: int | slice) -> Line | ProfileStream:
        if isinstance(index, slice):
            return ProfileStream(self._lines[index])
        return self._lines[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProfileStream):
            return self._lines == other._lines
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # -- Formatting ------------------------------------------------------

    def __str__(self) -> str:
        return "".join(line.format() for line in self._lines)

    def __repr__(self) -> str:
        return f"ProfileStream(lines={len(self._lines)}, errors={self.has_errors()})"
