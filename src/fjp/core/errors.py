"""fjp error-code hierarchy.

Every way a profile line can fail to classify, and every way a whole
profile operation can fail, is represented as a concrete exception class.

Hierarchy
---------
::

    FjpError
    +-- ProfileSyntaxError   (FJP-E1xx)
    +-- ProfileError         (FJP-E2xx)

Line-level syntax errors are raised by the directive parsers and turned
into :class:`~fjp.profile.content.Invalid` values by
:func:`~fjp.profile.content.parse_content`, so they never escape a stream
parse.  The :class:`ErrorKind` enum is the hashable, value-comparable
form stored inside those ``Invalid`` values.

Usage
-----
Raise concrete subclasses directly::

    raise BadCap("not_a_cap")

Catch by category::

    try:
        Command.parse(line)
    except ProfileSyntaxError as exc:
        kind = exc.kind
"""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fjp.profile.stream import ProfileStream

# ---------------------------------------------------------------------------
# Error kinds (data form of the syntax errors)
# ---------------------------------------------------------------------------


class ErrorKind(enum.StrEnum):
    """Why a profile line could not be classified."""

    BAD_COMMAND = "bad_command"
    BAD_CONDITION = "bad_condition"
    EMPTY_CONDITION = "empty_condition"
    BAD_CAP = "bad_cap"
    BAD_PROTOCOL = "bad_protocol"
    BAD_DBUS_POLICY = "bad_dbus_policy"
    BAD_SECCOMP_ERROR_ACTION = "bad_seccomp_error_action"
    BAD_BIND = "bad_bind"
    BAD_ENV = "bad_env"

    @property
    def error_class(self) -> type[ProfileSyntaxError]:
        """Return the exception class raised for this kind."""
        return _KIND_TO_CLASS[self]

    @property
    def code(self) -> str:
        return self.error_class.code

    @property
    def message(self) -> str:
        return self.error_class.message


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class FjpError(Exception):
    """Base exception for all fjp errors.

    Attributes
    ----------
    code : str
        fjp error code, e.g. ``"FJP-E100"``.
    message : str
        Human-readable description.
    details : dict[str, Any]
        Machine-readable context specific to the error instance.
    resolution : str
        Suggested action for the caller.
    """

    code: str = "FJP-E000"
    message: str = "Unknown fjp error"
    resolution: str = ""

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        resolution: str | None = None,
    ) -> None:
        self.details: dict[str, Any] = details or {}
        if message is not None:
            self.message = message
        if resolution is not None:
            self.resolution = resolution
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the error to a plain dictionary."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            payload["detail"] = self.details
        if self.resolution:
            payload["resolution"] = self.resolution
        return {"error": payload}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ===================================================================
# Category base classes
# ===================================================================

class ProfileSyntaxError(FjpError):
    """FJP-E1xx -- A single profile line is not recognised."""

    code = "FJP-E1XX"
    kind: ErrorKind


class ProfileError(FjpError):
    """FJP-E2xx -- A whole-profile operation failed."""

    code = "FJP-E2XX"


# ===================================================================
# FJP-E10x  Line shape errors
# ===================================================================

class BadCommand(ProfileSyntaxError):
    """FJP-E100 -- The line matches no directive keyword or shape."""

    code = "FJP-E100"
    kind = ErrorKind.BAD_COMMAND
    message = "Invalid command"
    resolution = "Check the directive name and its argument separator."


class BadCondition(ProfileSyntaxError):
    """FJP-E101 -- The line starts with ``?`` but the guard is unknown."""

    code = "FJP-E101"
    kind = ErrorKind.BAD_CONDITION
    message = "Invalid condition"
    resolution = "Use one of the known ?NAME: guards, e.g. ?HAS_X11:."


class EmptyCondition(ProfileSyntaxError):
    """FJP-E102 -- A guard is not followed by a command."""

    code = "FJP-E102"
    kind = ErrorKind.EMPTY_CONDITION
    message = "No command after condition"
    resolution = "Add the command the condition applies to after the guard."


# ===================================================================
# FJP-E11x  Value sub-grammar errors
# ===================================================================

class BadCap(ProfileSyntaxError):
    """FJP-E110 -- Unknown capability name."""

    code = "FJP-E110"
    kind = ErrorKind.BAD_CAP
    message = "Invalid capability"
    resolution = "Use lower-case capability names without the CAP_ prefix."


class BadProtocol(ProfileSyntaxError):
    """FJP-E111 -- Unknown network protocol family."""

    code = "FJP-E111"
    kind = ErrorKind.BAD_PROTOCOL
    message = "Invalid protocol"
    resolution = "Use unix, inet, inet6, netlink, packet or bluetooth."


class BadDBusPolicy(ProfileSyntaxError):
    """FJP-E112 -- Unknown D-Bus policy."""

    code = "FJP-E112"
    kind = ErrorKind.BAD_DBUS_POLICY
    message = "Invalid D-Bus policy"
    resolution = "Use filter or none."


class BadSeccompErrorAction(ProfileSyntaxError):
    """FJP-E113 -- Unknown seccomp error action."""

    code = "FJP-E113"
    kind = ErrorKind.BAD_SECCOMP_ERROR_ACTION
    message = "Invalid seccomp error action"
    resolution = "Use kill, log or an errno name such as EPERM."


# ===================================================================
# FJP-E12x  Two-part argument errors
# ===================================================================

class BadBind(ProfileSyntaxError):
    """FJP-E120 -- ``bind`` argument lacks the ``,`` separator."""

    code = "FJP-E120"
    kind = ErrorKind.BAD_BIND
    message = "Invalid bind, expected source,target"
    resolution = "Separate the source and target paths with a comma."


class BadEnv(ProfileSyntaxError):
    """FJP-E121 -- ``env`` argument lacks the ``=`` separator."""

    code = "FJP-E121"
    kind = ErrorKind.BAD_ENV
    message = "Invalid env, expected name=value"
    resolution = "Separate the variable name and value with '='."


_KIND_TO_CLASS: dict[ErrorKind, type[ProfileSyntaxError]] = {
    cls.kind: cls
    for cls in (
        BadCommand,
        BadCondition,
        EmptyCondition,
        BadCap,
        BadProtocol,
        BadDBusPolicy,
        BadSeccompErrorAction,
        BadBind,
        BadEnv,
    )
}


# ===================================================================
# FJP-E2xx  Profile errors
# ===================================================================

class InvalidProfile(ProfileError):
    """FJP-E200 -- A strictly parsed profile contains invalid lines.

    The fully populated stream is kept on :attr:`stream` so that callers
    can still report exactly which lines failed.
    """

    code = "FJP-E200"
    message = "Profile contains invalid lines"
    resolution = "Fix or remove the reported lines."

    def __init__(
        self,
        stream: ProfileStream,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.stream = stream
        if details is None:
            details = {
                "invalid_lines": [
                    line.lineno for line in stream.errors()
                ],
            }
        super().__init__(message, details=details)


class IncludeDepthExceeded(ProfileError):
    """FJP-E201 -- Include expansion went deeper than the configured limit."""

    code = "FJP-E201"
    message = "Too many include levels"
    resolution = "Look for include cycles or raise max_include_depth."


class ProfileNotFound(ProfileError):
    """FJP-E202 -- The profile source has no profile with the given name."""

    code = "FJP-E202"
    message = "Profile not found"
    resolution = "Check the profile name and the configured profile source."
