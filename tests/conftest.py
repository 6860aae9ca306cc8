"""Shared fixtures for the fjp test suite.

Provides realistic profile texts and an in-memory profile source that
the stream, diff and standalone tests build on.
"""
from __future__ import annotations

import pytest

from fjp.core.interfaces import InMemoryProfileSource

# ---------------------------------------------------------------------------
# Profile texts
# ---------------------------------------------------------------------------
FIREFOX_PROFILE = """\
# Firejail profile for firefox
# Persistent local customizations
include firefox.local
# Persistent global definitions
include globals.local

noblacklist ${HOME}/.cache/mozilla
noblacklist ${HOME}/.mozilla

include disable-common.inc
include disable-devel.inc

mkdir ${HOME}/.cache/mozilla/firefox
whitelist ${HOME}/.cache/mozilla/firefox
whitelist ${HOME}/.mozilla

?BROWSER_DISABLE_U2F: nou2f
?BROWSER_ALLOW_DRM: ignore noexec ${HOME}

apparmor
caps.drop all
netfilter
nodvd
nogroups
noinput
nonewprivs
noroot
notv
protocol unix,inet,inet6,netlink
seccomp !chroot
seccomp-error-action EPERM

private-bin firefox,sh,which
private-dev
private-etc alternatives,ca-certificates,crypto-policies,fonts
private-tmp

dbus-user filter
dbus-user.own org.mozilla.firefox.*
dbus-user.talk org.freedesktop.Notifications
dbus-system none

env MOZ_ENABLE_WAYLAND=1
bind /tmp/.X11-unix,/tmp/.X11-unix
"""

DISABLE_COMMON_INC = """\
# Disable common paths
blacklist /boot
blacklist /mnt
read-only ${HOME}/.bashrc
"""

DISABLE_DEVEL_INC = """\
blacklist /usr/bin/gdb
include disable-devel.local
"""

BROKEN_PROFILE = """\
# A profile with mistakes
noroot
caps.drop net_admin,not_a_cap
bogus-directive foo
?HAS_NET:
protocol unix,ipx
private-dev
"""


@pytest.fixture()
def firefox_text() -> str:
    return FIREFOX_PROFILE


@pytest.fixture()
def broken_text() -> str:
    return BROKEN_PROFILE


@pytest.fixture()
def profile_source() -> InMemoryProfileSource:
    """Source holding firefox.profile and the .inc files it includes."""
    return InMemoryProfileSource(
        {
            "firefox.profile": FIREFOX_PROFILE,
            "disable-common.inc": DISABLE_COMMON_INC,
            "disable-devel.inc": DISABLE_DEVEL_INC,
        }
    )
