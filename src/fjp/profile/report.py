"""Machine-readable report of a profile parse.

Collaborators that show parse problems to a user (an editor integration,
a linter run in CI) want the invalid lines with their numbers, original
text and error code, not the full line model.  These models carry exactly
that and serialise to compact JSON.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InvalidLineReport(BaseModel):
    """One line that could not be classified."""

    model_config = ConfigDict(strict=True, frozen=True)

    lineno: int | None = Field(
        description="0-based line number, or None if it was stripped.",
    )
    text: str = Field(description="The line exactly as it was read.")
    code: str = Field(description="fjp error code (FJP-EXXX).")
    message: str


class ParseReport(BaseModel):
    """Outcome of parsing one profile."""

    model_config = ConfigDict(strict=True)

    valid: bool
    line_count: int = Field(ge=0)
    errors: list[InvalidLineReport] = Field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the report to a compact JSON string."""
        return self.model_dump_json()
