"""Tests for the fjp error hierarchy and configuration model.

Covers:

1. **Hierarchy** -- categories, unique codes, the ``ErrorKind`` mapping.
2. **Serialisation** -- ``to_dict`` and ``repr``.
3. **ProfileConfig** -- defaults and validation.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from fjp.core.config import DEFAULT_MAX_INCLUDE_DEPTH, ProfileConfig
from fjp.core.errors import (
    BadBind,
    BadCap,
    BadCommand,
    BadCondition,
    BadDBusPolicy,
    BadEnv,
    BadProtocol,
    BadSeccompErrorAction,
    EmptyCondition,
    ErrorKind,
    FjpError,
    IncludeDepthExceeded,
    InvalidProfile,
    ProfileError,
    ProfileNotFound,
    ProfileSyntaxError,
)
from fjp.profile.stream import ProfileStream

SYNTAX_ERRORS = [
    BadCommand,
    BadCondition,
    EmptyCondition,
    BadCap,
    BadProtocol,
    BadDBusPolicy,
    BadSeccompErrorAction,
    BadBind,
    BadEnv,
]

PROFILE_ERRORS = [InvalidProfile, IncludeDepthExceeded, ProfileNotFound]

# ===================================================================
# Test: hierarchy
# ===================================================================


class TestHierarchy:
    @pytest.mark.parametrize("cls", SYNTAX_ERRORS)
    def test_syntax_errors(self, cls: type[ProfileSyntaxError]) -> None:
        assert issubclass(cls, ProfileSyntaxError)
        assert issubclass(cls, FjpError)
        assert cls.code.startswith("FJP-E1")

    @pytest.mark.parametrize("cls", PROFILE_ERRORS)
    def test_profile_errors(self, cls: type[ProfileError]) -> None:
        assert issubclass(cls, ProfileError)
        assert cls.code.startswith("FJP-E2")

    def test_codes_unique(self) -> None:
        codes = [cls.code for cls in SYNTAX_ERRORS + PROFILE_ERRORS]
        assert len(codes) == len(set(codes))

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_kind_maps_to_class(self, kind: ErrorKind) -> None:
        cls = kind.error_class
        assert cls.kind is kind
        assert kind.code == cls.code
        assert kind.message == cls.message

    def test_every_syntax_error_has_a_kind(self) -> None:
        assert {cls.kind for cls in SYNTAX_ERRORS} == set(ErrorKind)


# ===================================================================
# Test: serialisation
# ===================================================================


class TestSerialisation:
    def test_default_message(self) -> None:
        exc = BadCommand()
        assert str(exc) == "Invalid command"
        assert exc.details == {}

    def test_to_dict(self) -> None:
        exc = BadCap("Invalid capability: 'foo'", details={"token": "foo"})
        assert exc.to_dict() == {
            "error": {
                "code": "FJP-E110",
                "message": "Invalid capability: 'foo'",
                "detail": {"token": "foo"},
                "resolution": BadCap.resolution,
            }
        }

    def test_to_dict_without_details(self) -> None:
        payload = ProfileNotFound(resolution="")
        assert payload.to_dict() == {
            "error": {"code": "FJP-E202", "message": "Profile not found"}
        }

    def test_repr(self) -> None:
        assert repr(BadEnv()) == (
            "BadEnv(code='FJP-E121', message='Invalid env, expected name=value')"
        )

    def test_invalid_profile_keeps_stream(self) -> None:
        stream = ProfileStream.parse("noroot\nbogus\n")
        exc = InvalidProfile(stream)
        assert exc.stream is stream
        assert exc.details == {"invalid_lines": [1]}


# ===================================================================
# Test: ProfileConfig
# ===================================================================


class TestProfileConfig:
    def test_defaults(self) -> None:
        config = ProfileConfig()
        assert config.max_include_depth == DEFAULT_MAX_INCLUDE_DEPTH == 16
        assert config.keep_inc is False
        assert config.diff_ignore_comments is True

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProfileConfig(max_include_depth=-1)

    def test_strict_types(self) -> None:
        with pytest.raises(ValidationError):
            ProfileConfig(max_include_depth="3")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        config = ProfileConfig()
        with pytest.raises(ValidationError):
            config.keep_inc = True  # type: ignore[misc]
