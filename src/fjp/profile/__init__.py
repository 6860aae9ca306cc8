"""firejail profile line model.

This subpackage maps raw profile text to typed values and back:

* **values** -- closed sub-grammars (:class:`Capability`, :class:`Protocol`,
  :class:`DBusPolicy`, :class:`SeccompErrorAction`) and the two-part
  arguments :class:`BindMount` and :class:`EnvVar`.
* **command** -- :class:`Directive` table and :class:`Command`.
* **conditional** -- :class:`Guard` and :class:`Conditional`.
* **content** -- per-line classification (:func:`parse_content`) and
  :class:`Line`.
* **stream** -- :class:`ProfileStream`, a whole profile.
* **report** -- :class:`ParseReport` for showing invalid lines.
"""
from __future__ import annotations

from fjp.profile.command import ArgShape, Command, Directive
from fjp.profile.conditional import Conditional, Guard
from fjp.profile.content import (
    Blank,
    CommandLine,
    Comment,
    ConditionalLine,
    Content,
    Invalid,
    Line,
    parse_content,
)
from fjp.profile.report import InvalidLineReport, ParseReport
from fjp.profile.stream import ProfileStream, split_lines
from fjp.profile.values import (
    BindMount,
    Capability,
    DBusPolicy,
    EnvVar,
    Protocol,
    SeccompErrorAction,
    format_list,
    parse_list,
)

__all__ = [
    "ArgShape",
    "BindMount",
    "Blank",
    "Capability",
    "Command",
    "CommandLine",
    "Comment",
    "Conditional",
    "ConditionalLine",
    "Content",
    "DBusPolicy",
    "Directive",
    "EnvVar",
    "Guard",
    "Invalid",
    "InvalidLineReport",
    "Line",
    "ParseReport",
    "ProfileStream",
    "Protocol",
    "SeccompErrorAction",
    "format_list",
    "parse_content",
    "parse_list",
    "split_lines",
]
