"""fjp abstract interfaces and in-memory implementations.

This module defines the structural interface (``typing.Protocol``) for
the collaborator that supplies raw profile text, plus a lightweight
in-memory implementation suitable for testing.

Finding profiles on disk (current directory, user and system profile
directories) is left to implementations of :class:`ProfileSource`.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

# ===================================================================
# Protocol (interface) definitions
# ===================================================================

@runtime_checkable
class ProfileSource(Protocol):
    """Supplier of raw profile text by profile file name."""

    def read(self, name: str) -> str | None:
        """Return the text of the profile *name*, or ``None`` if it does not exist."""
        ...


# ===================================================================
# In-memory implementations (testing / development)
# ===================================================================

class InMemoryProfileSource:
    """In-memory profile source for testing and development.

    Profiles are held in a plain ``dict`` keyed by file name
    (``firefox.profile``, ``disable-common.inc``, ...).
    """

    def __init__(self, profiles: dict[str, str] | None = None) -> None:
        self._profiles: dict[str, str] = dict(profiles or {})

    # -- mutation helpers (not part of the Protocol) --------------------

    def put(self, name: str, text: str) -> None:
        """Store a profile (test helper -- not part of the Protocol)."""
        self._profiles[name] = text

    def remove(self, name: str) -> None:
        """Remove a profile (test helper)."""
        self._profiles.pop(name, None)

    # -- Protocol implementation ---------------------------------------

    def read(self, name: str) -> str | None:
        """Return the text stored for *name*."""
        return self._profiles.get(name)
