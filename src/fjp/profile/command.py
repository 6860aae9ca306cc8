"""Directive model: one firejail profile command per line.

A :class:`Command` pairs a :class:`Directive` (the keyword) with a typed
value whose shape is fixed per directive by :class:`ArgShape`.  Parsing
is table-driven and needs no prefix ordering:

1. A line equal to a directive keyword whose argument is absent or
   optional is that directive with value ``None``.  Fixed multi-word
   forms (``net none``, ``caps.drop all``) are matched here too.
2. Otherwise the line is split once on the first space; the first part
   must be a keyword that takes an argument, and the rest is converted
   according to the directive's shape.

A bare keyword is therefore only recognised when nothing follows it, and
``private-lib`` / ``private-lib a,b`` can never shadow each other.
"""
from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Union

from fjp.core.errors import BadCommand
from fjp.profile.values import (
    LIST_SEPARATOR,
    BindMount,
    Capability,
    DBusPolicy,
    EnvVar,
    Protocol,
    SeccompErrorAction,
    format_list,
    parse_list,
)

CommandValue = Union[
    None,
    str,
    tuple[str, ...],
    tuple[Capability, ...],
    tuple[Protocol, ...],
    DBusPolicy,
    SeccompErrorAction,
    BindMount,
    EnvVar,
]


class ArgShape(enum.Enum):
    """How the argument of a directive is written and typed."""

    FLAG = "flag"
    OPTIONAL_TEXT = "optional_text"
    TEXT = "text"
    OPTIONAL_LIST = "optional_list"
    LIST = "list"
    CAPS = "caps"
    PROTOCOLS = "protocols"
    DBUS_POLICY = "dbus_policy"
    ERROR_ACTION = "error_action"
    BIND = "bind"
    ENV = "env"

    @property
    def allows_bare(self) -> bool:
        """The keyword may appear without an argument."""
        return self in (ArgShape.FLAG, ArgShape.OPTIONAL_TEXT, ArgShape.OPTIONAL_LIST)

    @property
    def takes_argument(self) -> bool:
        return self is not ArgShape.FLAG

    @property
    def is_list(self) -> bool:
        return self in (
            ArgShape.OPTIONAL_LIST,
            ArgShape.LIST,
            ArgShape.CAPS,
            ArgShape.PROTOCOLS,
        )


class Directive(enum.StrEnum):
    """Every recognised profile directive, valued by its keyword text."""

    ALLOW_DEBUGGERS = "allow-debuggers"
    ALLUSERS = "allusers"
    APPARMOR = "apparmor"
    BIND = "bind"
    BLACKLIST = "blacklist"
    BLACKLIST_NOLOG = "blacklist-nolog"
    CAPS = "caps"
    CAPS_DROP_ALL = "caps.drop all"
    CAPS_DROP = "caps.drop"
    CAPS_KEEP = "caps.keep"
    CPU = "cpu"
    DBUS_USER = "dbus-user"
    DBUS_USER_OWN = "dbus-user.own"
    DBUS_USER_TALK = "dbus-user.talk"
    DBUS_USER_SEE = "dbus-user.see"
    DBUS_USER_CALL = "dbus-user.call"
    DBUS_USER_BROADCAST = "dbus-user.broadcast"
    DBUS_SYSTEM = "dbus-system"
    DBUS_SYSTEM_OWN = "dbus-system.own"
    DBUS_SYSTEM_TALK = "dbus-system.talk"
    DBUS_SYSTEM_SEE = "dbus-system.see"
    DBUS_SYSTEM_CALL = "dbus-system.call"
    DBUS_SYSTEM_BROADCAST = "dbus-system.broadcast"
    DETERMINISTIC_EXIT_CODE = "deterministic-exit-code"
    DETERMINISTIC_SHUTDOWN = "deterministic-shutdown"
    DISABLE_MNT = "disable-mnt"
    DNS = "dns"
    ENV = "env"
    HOSTNAME = "hostname"
    HOSTS_FILE = "hosts-file"
    IGNORE = "ignore"
    INCLUDE = "include"
    IPC_NAMESPACE = "ipc-namespace"
    JOIN_OR_START = "join-or-start"
    KEEP_CONFIG_PULSE = "keep-config-pulse"
    KEEP_DEV_SHM = "keep-dev-shm"
    KEEP_FD = "keep-fd"
    KEEP_SHELL_RC = "keep-shell-rc"
    KEEP_VAR_TMP = "keep-var-tmp"
    MACHINE_ID = "machine-id"
    MEMORY_DENY_WRITE_EXECUTE = "memory-deny-write-execute"
    MKDIR = "mkdir"
    MKFILE = "mkfile"
    MTU = "mtu"
    NAME = "name"
    NET_NONE = "net none"
    NETFILTER = "netfilter"
    NICE = "nice"
    NO3D = "no3d"
    NOBLACKLIST = "noblacklist"
    NODBUS = "nodbus"
    NODVD = "nodvd"
    NOEXEC = "noexec"
    NOGROUPS = "nogroups"
    NOINPUT = "noinput"
    NONEWPRIVS = "nonewprivs"
    NOPRINTERS = "noprinters"
    NOROOT = "noroot"
    NOSOUND = "nosound"
    NOTV = "notv"
    NOU2F = "nou2f"
    NOVIDEO = "novideo"
    NOWHITELIST = "nowhitelist"
    PRIVATE = "private"
    PRIVATE_BIN = "private-bin"
    PRIVATE_CACHE = "private-cache"
    PRIVATE_CWD = "private-cwd"
    PRIVATE_DEV = "private-dev"
    PRIVATE_ETC = "private-etc"
    PRIVATE_HOME = "private-home"
    PRIVATE_LIB = "private-lib"
    PRIVATE_OPT = "private-opt"
    PRIVATE_SRV = "private-srv"
    PRIVATE_TMP = "private-tmp"
    PROTOCOL = "protocol"
    QUIET = "quiet"
    READ_ONLY = "read-only"
    READ_WRITE = "read-write"
    RESTRICT_NAMESPACES = "restrict-namespaces"
    RLIMIT_AS = "rlimit-as"
    RLIMIT_CPU = "rlimit-cpu"
    RLIMIT_FSIZE = "rlimit-fsize"
    RLIMIT_NOFILE = "rlimit-nofile"
    RLIMIT_NPROC = "rlimit-nproc"
    RLIMIT_SIGPENDING = "rlimit-sigpending"
    RMENV = "rmenv"
    SECCOMP = "seccomp"
    SECCOMP_32 = "seccomp.32"
    SECCOMP_32_DROP = "seccomp.32.drop"
    SECCOMP_32_KEEP = "seccomp.32.keep"
    SECCOMP_BLOCK_SECONDARY = "seccomp.block-secondary"
    SECCOMP_DROP = "seccomp.drop"
    SECCOMP_KEEP = "seccomp.keep"
    SECCOMP_ERROR_ACTION = "seccomp-error-action"
    SHELL_NONE = "shell none"
    TIMEOUT = "timeout"
    TMPFS = "tmpfs"
    TRACELOG = "tracelog"
    VETH_NAME = "veth-name"
    WHITELIST = "whitelist"
    WHITELIST_RO = "whitelist-ro"
    WRITABLE_ETC = "writable-etc"
    WRITABLE_RUN_USER = "writable-run-user"
    WRITABLE_VAR = "writable-var"
    WRITABLE_VAR_LOG = "writable-var-log"
    X11 = "x11"
    X11_NONE = "x11 none"
    XEPHYR_SCREEN = "xephyr-screen"

    @property
    def shape(self) -> ArgShape:
        return _SHAPES.get(self, ArgShape.FLAG)


# Directives not listed here are flags.
_SHAPES: dict[Directive, ArgShape] = {
    Directive.BIND: ArgShape.BIND,
    Directive.BLACKLIST: ArgShape.TEXT,
    Directive.BLACKLIST_NOLOG: ArgShape.TEXT,
    Directive.CAPS_DROP: ArgShape.CAPS,
    Directive.CAPS_KEEP: ArgShape.CAPS,
    Directive.CPU: ArgShape.LIST,
    Directive.DBUS_USER: ArgShape.DBUS_POLICY,
    Directive.DBUS_USER_OWN: ArgShape.TEXT,
    Directive.DBUS_USER_TALK: ArgShape.TEXT,
    Directive.DBUS_USER_SEE: ArgShape.TEXT,
    Directive.DBUS_USER_CALL: ArgShape.TEXT,
    Directive.DBUS_USER_BROADCAST: ArgShape.TEXT,
    Directive.DBUS_SYSTEM: ArgShape.DBUS_POLICY,
    Directive.DBUS_SYSTEM_OWN: ArgShape.TEXT,
    Directive.DBUS_SYSTEM_TALK: ArgShape.TEXT,
    Directive.DBUS_SYSTEM_SEE: ArgShape.TEXT,
    Directive.DBUS_SYSTEM_CALL: ArgShape.TEXT,
    Directive.DBUS_SYSTEM_BROADCAST: ArgShape.TEXT,
    Directive.DNS: ArgShape.TEXT,
    Directive.ENV: ArgShape.ENV,
    Directive.HOSTNAME: ArgShape.TEXT,
    Directive.HOSTS_FILE: ArgShape.TEXT,
    Directive.IGNORE: ArgShape.TEXT,
    Directive.INCLUDE: ArgShape.TEXT,
    Directive.JOIN_OR_START: ArgShape.TEXT,
    Directive.KEEP_FD: ArgShape.LIST,
    Directive.MKDIR: ArgShape.TEXT,
    Directive.MKFILE: ArgShape.TEXT,
    Directive.MTU: ArgShape.TEXT,
    Directive.NAME: ArgShape.TEXT,
    Directive.NETFILTER: ArgShape.OPTIONAL_TEXT,
    Directive.NICE: ArgShape.TEXT,
    Directive.NOBLACKLIST: ArgShape.TEXT,
    Directive.NOEXEC: ArgShape.TEXT,
    Directive.NOWHITELIST: ArgShape.TEXT,
    Directive.PRIVATE: ArgShape.OPTIONAL_TEXT,
    Directive.PRIVATE_BIN: ArgShape.LIST,
    Directive.PRIVATE_CWD: ArgShape.OPTIONAL_TEXT,
    Directive.PRIVATE_ETC: ArgShape.LIST,
    Directive.PRIVATE_HOME: ArgShape.LIST,
    Directive.PRIVATE_LIB: ArgShape.OPTIONAL_LIST,
    Directive.PRIVATE_OPT: ArgShape.LIST,
    Directive.PRIVATE_SRV: ArgShape.LIST,
    Directive.PROTOCOL: ArgShape.PROTOCOLS,
    Directive.READ_ONLY: ArgShape.TEXT,
    Directive.READ_WRITE: ArgShape.TEXT,
    Directive.RESTRICT_NAMESPACES: ArgShape.OPTIONAL_LIST,
    Directive.RLIMIT_AS: ArgShape.TEXT,
    Directive.RLIMIT_CPU: ArgShape.TEXT,
    Directive.RLIMIT_FSIZE: ArgShape.TEXT,
    Directive.RLIMIT_NOFILE: ArgShape.TEXT,
    Directive.RLIMIT_NPROC: ArgShape.TEXT,
    Directive.RLIMIT_SIGPENDING: ArgShape.TEXT,
    Directive.RMENV: ArgShape.TEXT,
    Directive.SECCOMP: ArgShape.OPTIONAL_LIST,
    Directive.SECCOMP_32: ArgShape.OPTIONAL_LIST,
    Directive.SECCOMP_32_DROP: ArgShape.LIST,
    Directive.SECCOMP_32_KEEP: ArgShape.LIST,
    Directive.SECCOMP_DROP: ArgShape.LIST,
    Directive.SECCOMP_KEEP: ArgShape.LIST,
    Directive.SECCOMP_ERROR_ACTION: ArgShape.ERROR_ACTION,
    Directive.TIMEOUT: ArgShape.TEXT,
    Directive.TMPFS: ArgShape.TEXT,
    Directive.VETH_NAME: ArgShape.TEXT,
    Directive.WHITELIST: ArgShape.TEXT,
    Directive.WHITELIST_RO: ArgShape.TEXT,
    Directive.XEPHYR_SCREEN: ArgShape.TEXT,
}

_CONVERTERS: dict[ArgShape, Callable[[str], CommandValue]] = {
    ArgShape.OPTIONAL_TEXT: str,
    ArgShape.TEXT: str,
    ArgShape.OPTIONAL_LIST: partial(parse_list, str),
    ArgShape.LIST: partial(parse_list, str),
    ArgShape.CAPS: partial(parse_list, Capability.parse),
    ArgShape.PROTOCOLS: partial(parse_list, Protocol.parse),
    ArgShape.DBUS_POLICY: DBusPolicy.parse,
    ArgShape.ERROR_ACTION: SeccompErrorAction.parse,
    ArgShape.BIND: BindMount.parse,
    ArgShape.ENV: EnvVar.parse,
}

_ITEM_PARSERS: dict[ArgShape, Callable[[str], object]] = {
    ArgShape.OPTIONAL_LIST: str,
    ArgShape.LIST: str,
    ArgShape.CAPS: Capability.parse,
    ArgShape.PROTOCOLS: Protocol.parse,
}

_VALUE_TYPES: dict[ArgShape, type] = {
    ArgShape.DBUS_POLICY: DBusPolicy,
    ArgShape.ERROR_ACTION: SeccompErrorAction,
    ArgShape.BIND: BindMount,
    ArgShape.ENV: EnvVar,
}


def _normalise(directive: Directive, value: object) -> CommandValue:
    """Return *value* in the typed form stored for *directive*.

    Plain-string tokens go through the same sub-grammar parser as profile
    text and fail the same way.  Values that would not format back to
    themselves are rejected, so every ``Command`` round-trips.

    Raises
    ------
    TypeError
        The value has the wrong type for the directive's shape.
    ValueError
        The value cannot be written as profile text (empty list, ``,``
        inside a list item, a two-part value whose delimiter is ambiguous).
    ProfileSyntaxError
        A token is not part of the sub-grammar (``BadCap``, ...).
    """
    shape = directive.shape
    name = directive.value

    if shape.is_list:
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"{name!r} takes a sequence, got {type(value).__name__}")
        if not value:
            raise ValueError(f"{name!r} needs at least one item")
        items = []
        for item in value:
            if not isinstance(item, str):
                raise TypeError(f"{name!r} items must be str, got {type(item).__name__}")
            if LIST_SEPARATOR in item:
                raise ValueError(f"{name!r} item {item!r} contains {LIST_SEPARATOR!r}")
            items.append(_ITEM_PARSERS[shape](item))
        return tuple(items)

    value_type = _VALUE_TYPES.get(shape)
    if value_type is None:
        if not isinstance(value, str):
            raise TypeError(f"{name!r} takes str, got {type(value).__name__}")
        return str(value)
    if not isinstance(value, value_type):
        if not isinstance(value, str):
            raise TypeError(
                f"{name!r} takes {value_type.__name__}, got {type(value).__name__}"
            )
        return _CONVERTERS[shape](value)
    if _CONVERTERS[shape](str(value)) != value:
        raise ValueError(f"{name!r} value {str(value)!r} does not parse back unchanged")
    return value


# Lookup tables: whole line -> bare directive, first word -> argument directive.
_BARE: dict[str, Directive] = {
    d.value: d for d in Directive if d.shape.allows_bare
}
_WITH_ARGUMENT: dict[str, Directive] = {
    d.value: d for d in Directive if d.shape.takes_argument
}


@dataclass(frozen=True, slots=True)
class Command:
    """A single profile directive together with its typed value.

    Commands are immutable and compare by value, so they can be shared
    between streams and used in sets.
    """

    directive: Directive
    value: CommandValue = None

    def __post_init__(self) -> None:
        shape = self.directive.shape
        if self.value is None:
            if not shape.allows_bare:
                raise ValueError(f"{self.directive.value!r} requires an argument")
            return
        if not shape.takes_argument:
            raise ValueError(f"{self.directive.value!r} takes no argument")
        object.__setattr__(self, "value", _normalise(self.directive, self.value))

    @classmethod
    def parse(cls, line: str) -> Command:
        """Parse one directive line.

        Raises
        ------
        BadCommand
            If no directive matches the line.
        ProfileSyntaxError
            The sub-grammar error of a recognised directive whose argument
            is malformed (``BadCap``, ``BadBind``, ...).
        """
        directive = _BARE.get(line)
        if directive is not None:
            return cls(directive)

        keyword, sep, argument = line.partition(" ")
        directive = _WITH_ARGUMENT.get(keyword) if sep else None
        if directive is None:
            raise BadCommand(details={"line": line})
        return cls(directive, _CONVERTERS[directive.shape](argument))

    @property
    def keyword(self) -> str:
        return self.directive.value

    def format(self) -> str:
        """Return the directive as profile text (without newline)."""
        if self.value is None:
            return self.directive.value
        if self.directive.shape.is_list:
            argument = format_list(self.value)  # type: ignore[arg-type]
        else:
            argument = str(self.value)
        return f"{self.directive.value} {argument}"

    def __str__(self) -> str:
        return self.format()
