"""fjp configuration.

Defines the validated settings model read by the profile operations that
go beyond a single parse: include expansion and diffing.  Defaults match
the behaviour of the firejail profile tooling.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_INCLUDE_DEPTH: int = 16


class ProfileConfig(BaseModel):
    """Settings for include expansion and profile diffing.

    All fields carry defaults, so ``ProfileConfig()`` is the normal way
    to get a configuration.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    max_include_depth: int = Field(
        default=DEFAULT_MAX_INCLUDE_DEPTH,
        ge=0,
        description=(
            "Maximum nesting of include directives followed when "
            "generating a standalone profile."
        ),
    )
    keep_inc: bool = Field(
        default=False,
        description=(
            "When True, 'include *.inc' lines are kept verbatim instead "
            "of being inlined."
        ),
    )
    diff_ignore_comments: bool = Field(
        default=True,
        description="Leave comment lines out of profile diffs.",
    )
