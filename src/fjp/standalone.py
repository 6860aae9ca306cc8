"""Standalone profiles: inline every ``include`` recursively.

A standalone profile contains the lines of a profile and, in place of
each ``include X`` directive, the lines of ``X`` (expanded the same way).
Profiles are obtained from a :class:`~fjp.core.interfaces.ProfileSource`.

Rules:

* Only top-level ``include`` commands are expanded; an include behind a
  conditional is kept as written.
* With ``keep_inc``, includes of ``*.inc`` files are kept as written.
* An include the source cannot provide is dropped (firejail ignores
  missing includes too, e.g. absent ``.local`` overrides).
* Nesting deeper than ``max_include_depth`` raises
  :class:`~fjp.core.errors.IncludeDepthExceeded`, which also stops
  include cycles.
"""
from __future__ import annotations

import logging

from fjp.core.config import ProfileConfig
from fjp.core.errors import IncludeDepthExceeded, ProfileNotFound
from fjp.core.interfaces import ProfileSource
from fjp.profile.command import Directive
from fjp.profile.content import CommandLine
from fjp.profile.stream import ProfileStream

logger = logging.getLogger(__name__)


def expand_includes(
    name: str,
    source: ProfileSource,
    *,
    config: ProfileConfig | None = None,
) -> ProfileStream:
    """Return profile *name* with its includes inlined.

    The result is renumbered from 0; invalid lines of any file are kept
    verbatim.

    Raises
    ------
    ProfileNotFound
        *source* has no profile called *name*.
    IncludeDepthExceeded
        Includes are nested deeper than ``config.max_include_depth``.
    """
    config = config or ProfileConfig()
    text = source.read(name)
    if text is None:
        raise ProfileNotFound(f"Profile not found: {name}", details={"name": name})

    standalone = ProfileStream()
    _expand(text, source, config, standalone, depth=0)
    standalone.rewrite_lineno()
    return standalone


def _expand(
    text: str,
    source: ProfileSource,
    config: ProfileConfig,
    standalone: ProfileStream,
    depth: int,
) -> None:
    stream = ProfileStream.parse(text)
    stream.strip_lineno()
    for line in stream:
        content = line.content
        if not (
            isinstance(content, CommandLine)
            and content.command.directive is Directive.INCLUDE
        ):
            standalone.append(line)
            continue

        target = str(content.command.value)
        if config.keep_inc and target.endswith(".inc"):
            standalone.append(line)
            continue
        if depth >= config.max_include_depth:
            raise IncludeDepthExceeded(
                details={"name": target, "depth": depth + 1},
            )

        included = source.read(target)
        if included is None:
            logger.debug("Skipping missing include %s", target)
            continue
        logger.debug("Expanding include %s at depth %d", target, depth + 1)
        _expand(included, source, config, standalone, depth + 1)
