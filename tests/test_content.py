"""Tests for conditionals and per-line classification.

Covers:

1. **Conditional** -- guard lookup, the empty-condition check, errors of
   the guarded command.
2. **parse_content** -- classification order, never raising, the error
   kind recorded in ``Invalid``.
3. **Content** -- the base class requires a text rendering.
4. **Line** -- predicates and formatting.
"""
from __future__ import annotations

import pytest

from fjp.core.errors import BadCap, BadCommand, BadCondition, EmptyCondition, ErrorKind
from fjp.profile.command import Command, Directive
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
from fjp.profile.values import Capability

# ===================================================================
# Test: Conditional
# ===================================================================


class TestConditional:
    def test_parse(self) -> None:
        conditional = Conditional.parse("?HAS_X11: noroot")
        assert conditional == Conditional(Guard.HAS_X11, Command(Directive.NOROOT))

    @pytest.mark.parametrize("guard", list(Guard))
    def test_every_guard_round_trips(self, guard: Guard) -> None:
        line = f"{guard.value} caps.drop all"
        assert Conditional.parse(line).format() == line

    def test_guarded_command_with_argument(self) -> None:
        conditional = Conditional.parse("?BROWSER_ALLOW_DRM: ignore noexec ${HOME}")
        assert conditional.guard is Guard.BROWSER_ALLOW_DRM
        assert conditional.command == Command(Directive.IGNORE, "noexec ${HOME}")

    def test_unknown_guard(self) -> None:
        with pytest.raises(BadCondition) as exc_info:
            Conditional.parse("?HAS_WAYLAND: noroot")
        assert exc_info.value.details == {"guard": "?HAS_WAYLAND:"}

    def test_guard_without_command(self) -> None:
        with pytest.raises(EmptyCondition):
            Conditional.parse("?HAS_NET:")

    def test_guard_with_trailing_space_only(self) -> None:
        with pytest.raises(EmptyCondition):
            Conditional.parse("?HAS_NET: ")

    def test_empty_checked_before_guard(self) -> None:
        with pytest.raises(EmptyCondition):
            Conditional.parse("?NOT_A_GUARD:")

    def test_bad_guarded_command(self) -> None:
        with pytest.raises(BadCommand):
            Conditional.parse("?HAS_NET: bogus")

    def test_bad_guarded_value(self) -> None:
        with pytest.raises(BadCap):
            Conditional.parse("?HAS_NET: caps.keep not_a_cap")


# ===================================================================
# Test: parse_content
# ===================================================================


class TestParseContent:
    def test_blank(self) -> None:
        assert parse_content("") == Blank()

    def test_comment(self) -> None:
        assert parse_content("# Firejail profile") == Comment(" Firejail profile")

    def test_empty_comment(self) -> None:
        assert parse_content("#") == Comment("")

    def test_commented_out_directive_is_a_comment(self) -> None:
        assert parse_content("#noroot") == Comment("noroot")

    def test_command(self) -> None:
        content = parse_content("caps.drop net_admin")
        assert content == CommandLine(
            Command(Directive.CAPS_DROP, (Capability.NET_ADMIN,))
        )

    def test_conditional(self) -> None:
        content = parse_content("?HAS_NOSOUND: nosound")
        assert isinstance(content, ConditionalLine)
        assert content.conditional.guard is Guard.HAS_NOSOUND

    @pytest.mark.parametrize(
        ("line", "kind"),
        [
            ("bogus-directive foo", ErrorKind.BAD_COMMAND),
            ("noroot ", ErrorKind.BAD_COMMAND),
            ("   ", ErrorKind.BAD_COMMAND),
            ("?HAS_NET:", ErrorKind.EMPTY_CONDITION),
            ("?", ErrorKind.EMPTY_CONDITION),
            ("?UNKNOWN: noroot", ErrorKind.BAD_CONDITION),
            ("caps.drop net_admin,not_a_cap", ErrorKind.BAD_CAP),
            ("protocol unix,ipx", ErrorKind.BAD_PROTOCOL),
            ("dbus-system allow", ErrorKind.BAD_DBUS_POLICY),
            ("seccomp-error-action ENOPE", ErrorKind.BAD_SECCOMP_ERROR_ACTION),
            ("bind /only-source", ErrorKind.BAD_BIND),
            ("env NO_VALUE", ErrorKind.BAD_ENV),
            ("?HAS_X11: env NO_VALUE", ErrorKind.BAD_ENV),
        ],
    )
    def test_invalid(self, line: str, kind: ErrorKind) -> None:
        content = parse_content(line)
        assert content == Invalid(line, kind)
        assert not content.is_valid
        assert content.text() == line

    def test_valid_contents_report_valid(self) -> None:
        for line in ("", "#x", "noroot", "?HAS_NET: noroot"):
            assert parse_content(line).is_valid

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "#",
            "# comment with  double  spaces ",
            "noroot",
            "private-bin bash,sh",
            "?HAS_APPIMAGE: whitelist ${HOME}/.local/share/appimagekit",
            "not a directive",
            "?HAS_NET:",
        ],
    )
    def test_format_reproduces_line(self, line: str) -> None:
        assert parse_content(line).format() == line + "\n"


# ===================================================================
# Test: Content base
# ===================================================================


class TestContentBase:
    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Content()  # type: ignore[abstract]

    def test_variant_without_text_cannot_be_built(self) -> None:
        class Unfinished(Content):
            pass

        with pytest.raises(TypeError):
            Unfinished()  # type: ignore[abstract]

    def test_every_variant_is_content(self) -> None:
        for content in (Blank(), Comment("x"), parse_content("noroot"), parse_content("?")):
            assert isinstance(content, Content)


# ===================================================================
# Test: Line
# ===================================================================


class TestLine:
    def test_predicates(self) -> None:
        assert Line(0, Blank()).is_blank
        assert Line(1, Comment("x")).is_comment
        assert Line(2, parse_content("noroot")).is_command
        assert Line(3, parse_content("?HAS_NET: noroot")).is_conditional
        assert Line(4, parse_content("bogus")).is_invalid

    def test_predicates_are_exclusive(self) -> None:
        line = Line(0, parse_content("noroot"))
        assert not line.is_blank
        assert not line.is_comment
        assert not line.is_conditional
        assert not line.is_invalid

    def test_equality_includes_lineno(self) -> None:
        assert Line(0, Blank()) == Line(0, Blank())
        assert Line(0, Blank()) != Line(1, Blank())

    def test_format(self) -> None:
        assert Line(None, parse_content("nonewprivs")).format() == "nonewprivs\n"
