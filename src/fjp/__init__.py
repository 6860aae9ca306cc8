"""fjp -- firejail profile line model.

Parses firejail profile text into typed lines and formats it back,
byte for byte.  Unrecognised lines are kept as ``Invalid`` values rather
than aborting the parse.

Modules
-------
* :mod:`fjp.profile` -- sub-grammars, directives, lines and streams.
* :mod:`fjp.diff` -- options unique to each of two profiles.
* :mod:`fjp.standalone` -- recursive ``include`` inlining.
"""
from __future__ import annotations

__version__ = "0.3.0"

# ---------------------------------------------------------------------------
# Core -- errors, config, interfaces
# ---------------------------------------------------------------------------
from fjp.core.config import ProfileConfig
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
from fjp.core.interfaces import InMemoryProfileSource, ProfileSource

# ---------------------------------------------------------------------------
# Profile operations
# ---------------------------------------------------------------------------
from fjp.diff import ProfileDiff, diff_streams

# ---------------------------------------------------------------------------
# Line model
# ---------------------------------------------------------------------------
from fjp.profile import (
    ArgShape,
    BindMount,
    Blank,
    Capability,
    Command,
    CommandLine,
    Comment,
    Conditional,
    ConditionalLine,
    Content,
    DBusPolicy,
    Directive,
    EnvVar,
    Guard,
    Invalid,
    InvalidLineReport,
    Line,
    ParseReport,
    ProfileStream,
    Protocol,
    SeccompErrorAction,
    parse_content,
)
from fjp.standalone import expand_includes

__all__ = [
    # Meta
    "__version__",
    # Config & interfaces
    "ProfileConfig",
    "ProfileSource",
    "InMemoryProfileSource",
    # Error hierarchy
    "FjpError",
    "ProfileSyntaxError",
    "ProfileError",
    "ErrorKind",
    "BadCommand",
    "BadCondition",
    "EmptyCondition",
    "BadCap",
    "BadProtocol",
    "BadDBusPolicy",
    "BadSeccompErrorAction",
    "BadBind",
    "BadEnv",
    "InvalidProfile",
    "IncludeDepthExceeded",
    "ProfileNotFound",
    # Sub-grammars
    "Capability",
    "Protocol",
    "DBusPolicy",
    "SeccompErrorAction",
    "BindMount",
    "EnvVar",
    # Directives
    "ArgShape",
    "Directive",
    "Command",
    "Guard",
    "Conditional",
    # Lines & streams
    "Content",
    "Blank",
    "Comment",
    "ConditionalLine",
    "CommandLine",
    "Invalid",
    "Line",
    "parse_content",
    "ProfileStream",
    "ParseReport",
    "InvalidLineReport",
    # Operations
    "ProfileDiff",
    "diff_streams",
    "expand_includes",
]
