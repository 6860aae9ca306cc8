"""Profile diff: the options unique to each of two profiles.

Two profiles are compared as sets of line contents.  A line of one
profile is *unique* when no line of the other profile has an equal
content; order and line numbers of the unique lines are preserved.
"""
from __future__ import annotations

from dataclasses import dataclass

from fjp.core.config import ProfileConfig
from fjp.profile.stream import ProfileStream


@dataclass(frozen=True, slots=True)
class ProfileDiff:
    """Lines unique to the left and to the right profile."""

    left_unique: ProfileStream
    right_unique: ProfileStream

    @property
    def is_identical(self) -> bool:
        return not self.left_unique and not self.right_unique

    def render(self, left_name: str, right_name: str) -> str:
        """Render the diff as text, one block per profile."""
        return (
            f"The following options are unique to {left_name}:\n"
            f"{self.left_unique}\n"
            f"The following options are unique to {right_name}:\n"
            f"{self.right_unique}\n"
        )


def _unique(
    stream: ProfileStream, other: ProfileStream, config: ProfileConfig
) -> ProfileStream:
    return ProfileStream(
        line
        for line in stream
        if not (config.diff_ignore_comments and line.is_comment)
        and not other.contains(line)
    )


def diff_streams(
    left: ProfileStream,
    right: ProfileStream,
    *,
    config: ProfileConfig | None = None,
) -> ProfileDiff:
    """Compute the lines unique to *left* and to *right*."""
    config = config or ProfileConfig()
    return ProfileDiff(
        left_unique=_unique(left, right, config),
        right_unique=_unique(right, left, config),
    )
