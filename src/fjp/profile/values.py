"""Value sub-grammars used inside profile directives.

Each sub-grammar is a small closed vocabulary with a bijective mapping
between a textual token and an enum member:

* **Capability** -- POSIX capability names for ``caps.drop``/``caps.keep``.
* **Protocol** -- socket families for ``protocol``.
* **DBusPolicy** -- ``filter`` or ``none`` for ``dbus-user``/``dbus-system``.
* **SeccompErrorAction** -- ``kill``, ``log`` or an errno name for
  ``seccomp-error-action``.

Two directives carry a value made of two parts split on a delimiter;
they are modelled as named tuples:

* **BindMount** -- ``bind source,target``.
* **EnvVar** -- ``env NAME=value``.

Enums use *string* values equal to the profile token, so ``str(member)``
is already the formatted form.
"""
from __future__ import annotations

import enum
from collections.abc import Callable
from typing import NamedTuple, TypeVar

from fjp.core.errors import (
    BadBind,
    BadCap,
    BadDBusPolicy,
    BadEnv,
    BadProtocol,
    BadSeccompErrorAction,
    ProfileSyntaxError,
)

_E = TypeVar("_E", bound=enum.StrEnum)
_T = TypeVar("_T")

LIST_SEPARATOR: str = ","


def _lookup(cls: type[_E], token: str, error: type[ProfileSyntaxError]) -> _E:
    try:
        return cls(token)
    except ValueError:
        raise error(
            f"{error.message}: {token!r}",
            details={"token": token},
        ) from None


def parse_list(parse: Callable[[str], _T], text: str) -> tuple[_T, ...]:
    """Split *text* on ``,`` and convert every item with *parse*.

    The first item that fails aborts the whole list; its error propagates
    unchanged.
    """
    return tuple(parse(item) for item in text.split(LIST_SEPARATOR))


def format_list(items: tuple[object, ...]) -> str:
    """Join *items* with ``,`` in their stored order."""
    return LIST_SEPARATOR.join(str(item) for item in items)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Capability(enum.StrEnum):
    """Linux capability names, as written in ``caps.*`` directives."""

    AUDIT_CONTROL = "audit_control"
    AUDIT_READ = "audit_read"
    AUDIT_WRITE = "audit_write"
    BLOCK_SUSPEND = "block_suspend"
    CHOWN = "chown"
    DAC_OVERRIDE = "dac_override"
    DAC_READ_SEARCH = "dac_read_search"
    FOWNER = "fowner"
    FSETID = "fsetid"
    IPC_LOCK = "ipc_lock"
    IPC_OWNER = "ipc_owner"
    KILL = "kill"
    LEASE = "lease"
    LINUX_IMMUTABLE = "linux_immutable"
    MAC_ADMIN = "mac_admin"
    MAC_OVERRIDE = "mac_override"
    MKNOD = "mknod"
    NET_ADMIN = "net_admin"
    NET_BIND_SERVICE = "net_bind_service"
    NET_BROADCAST = "net_broadcast"
    NET_RAW = "net_raw"
    SETFCAP = "setfcap"
    SETGID = "setgid"
    SETPCAP = "setpcap"
    SETUID = "setuid"
    SYS_ADMIN = "sys_admin"
    SYS_BOOT = "sys_boot"
    SYS_CHROOT = "sys_chroot"
    SYS_MODULE = "sys_module"
    SYS_NICE = "sys_nice"
    SYS_PACCT = "sys_pacct"
    SYS_PTRACE = "sys_ptrace"
    SYS_RAWIO = "sys_rawio"
    SYS_RESOURCE = "sys_resource"
    SYS_TIME = "sys_time"
    SYS_TTY_CONFIG = "sys_tty_config"
    SYSLOG = "syslog"
    WAKE_ALARM = "wake_alarm"

    @classmethod
    def parse(cls, token: str) -> Capability:
        """Return the capability named *token*; raise :class:`BadCap` otherwise."""
        return _lookup(cls, token, BadCap)

    def format(self) -> str:
        return self.value


class Protocol(enum.StrEnum):
    """Socket families accepted by the ``protocol`` directive."""

    UNIX = "unix"
    INET = "inet"
    INET6 = "inet6"
    NETLINK = "netlink"
    PACKET = "packet"
    BLUETOOTH = "bluetooth"

    @classmethod
    def parse(cls, token: str) -> Protocol:
        """Return the protocol named *token*; raise :class:`BadProtocol` otherwise."""
        return _lookup(cls, token, BadProtocol)

    def format(self) -> str:
        return self.value


class DBusPolicy(enum.StrEnum):
    """Policy of the session or system bus proxy."""

    FILTER = "filter"
    NONE = "none"

    @classmethod
    def parse(cls, token: str) -> DBusPolicy:
        return _lookup(cls, token, BadDBusPolicy)

    def format(self) -> str:
        return self.value


class SeccompErrorAction(enum.StrEnum):
    """Action taken when a blocked syscall is called.

    Either ``kill`` the process, ``log`` the call, or fail it with one of
    the Linux errno values (by name).
    """

    KILL = "kill"
    LOG = "log"
    EPERM = "EPERM"
    ENOENT = "ENOENT"
    ESRCH = "ESRCH"
    EINTR = "EINTR"
    EIO = "EIO"
    ENXIO = "ENXIO"
    E2BIG = "E2BIG"
    ENOEXEC = "ENOEXEC"
    EBADF = "EBADF"
    ECHILD = "ECHILD"
    EAGAIN = "EAGAIN"
    ENOMEM = "ENOMEM"
    EACCES = "EACCES"
    EFAULT = "EFAULT"
    ENOTBLK = "ENOTBLK"
    EBUSY = "EBUSY"
    EEXIST = "EEXIST"
    EXDEV = "EXDEV"
    ENODEV = "ENODEV"
    ENOTDIR = "ENOTDIR"
    EISDIR = "EISDIR"
    EINVAL = "EINVAL"
    ENFILE = "ENFILE"
    EMFILE = "EMFILE"
    ENOTTY = "ENOTTY"
    ETXTBSY = "ETXTBSY"
    EFBIG = "EFBIG"
    ENOSPC = "ENOSPC"
    ESPIPE = "ESPIPE"
    EROFS = "EROFS"
    EMLINK = "EMLINK"
    EPIPE = "EPIPE"
    EDOM = "EDOM"
    ERANGE = "ERANGE"
    EDEADLK = "EDEADLK"
    ENAMETOOLONG = "ENAMETOOLONG"
    ENOLCK = "ENOLCK"
    ENOSYS = "ENOSYS"
    ENOTEMPTY = "ENOTEMPTY"
    ELOOP = "ELOOP"
    ENOMSG = "ENOMSG"
    EIDRM = "EIDRM"
    ECHRNG = "ECHRNG"
    EL2NSYNC = "EL2NSYNC"
    EL3HLT = "EL3HLT"
    EL3RST = "EL3RST"
    ELNRNG = "ELNRNG"
    EUNATCH = "EUNATCH"
    ENOCSI = "ENOCSI"
    EL2HLT = "EL2HLT"
    EBADE = "EBADE"
    EBADR = "EBADR"
    EXFULL = "EXFULL"
    ENOANO = "ENOANO"
    EBADRQC = "EBADRQC"
    EBADSLT = "EBADSLT"
    EBFONT = "EBFONT"
    ENOSTR = "ENOSTR"
    ENODATA = "ENODATA"
    ETIME = "ETIME"
    ENOSR = "ENOSR"
    ENONET = "ENONET"
    ENOPKG = "ENOPKG"
    EREMOTE = "EREMOTE"
    ENOLINK = "ENOLINK"
    EADV = "EADV"
    ESRMNT = "ESRMNT"
    ECOMM = "ECOMM"
    EPROTO = "EPROTO"
    EMULTIHOP = "EMULTIHOP"
    EDOTDOT = "EDOTDOT"
    EBADMSG = "EBADMSG"
    EOVERFLOW = "EOVERFLOW"
    ENOTUNIQ = "ENOTUNIQ"
    EBADFD = "EBADFD"
    EREMCHG = "EREMCHG"
    ELIBACC = "ELIBACC"
    ELIBBAD = "ELIBBAD"
    ELIBSCN = "ELIBSCN"
    ELIBMAX = "ELIBMAX"
    ELIBEXEC = "ELIBEXEC"
    EILSEQ = "EILSEQ"
    ERESTART = "ERESTART"
    ESTRPIPE = "ESTRPIPE"
    EUSERS = "EUSERS"
    ENOTSOCK = "ENOTSOCK"
    EDESTADDRREQ = "EDESTADDRREQ"
    EMSGSIZE = "EMSGSIZE"
    EPROTOTYPE = "EPROTOTYPE"
    ENOPROTOOPT = "ENOPROTOOPT"
    EPROTONOSUPPORT = "EPROTONOSUPPORT"
    ESOCKTNOSUPPORT = "ESOCKTNOSUPPORT"
    EOPNOTSUPP = "EOPNOTSUPP"
    EPFNOSUPPORT = "EPFNOSUPPORT"
    EAFNOSUPPORT = "EAFNOSUPPORT"
    EADDRINUSE = "EADDRINUSE"
    EADDRNOTAVAIL = "EADDRNOTAVAIL"
    ENETDOWN = "ENETDOWN"
    ENETUNREACH = "ENETUNREACH"
    ENETRESET = "ENETRESET"
    ECONNABORTED = "ECONNABORTED"
    ECONNRESET = "ECONNRESET"
    ENOBUFS = "ENOBUFS"
    EISCONN = "EISCONN"
    ENOTCONN = "ENOTCONN"
    ESHUTDOWN = "ESHUTDOWN"
    ETOOMANYREFS = "ETOOMANYREFS"
    ETIMEDOUT = "ETIMEDOUT"
    ECONNREFUSED = "ECONNREFUSED"
    EHOSTDOWN = "EHOSTDOWN"
    EHOSTUNREACH = "EHOSTUNREACH"
    EALREADY = "EALREADY"
    EINPROGRESS = "EINPROGRESS"
    ESTALE = "ESTALE"
    EUCLEAN = "EUCLEAN"
    ENOTNAM = "ENOTNAM"
    ENAVAIL = "ENAVAIL"
    EISNAM = "EISNAM"
    EREMOTEIO = "EREMOTEIO"
    EDQUOT = "EDQUOT"
    ENOMEDIUM = "ENOMEDIUM"
    EMEDIUMTYPE = "EMEDIUMTYPE"
    ECANCELED = "ECANCELED"
    ENOKEY = "ENOKEY"
    EKEYEXPIRED = "EKEYEXPIRED"
    EKEYREVOKED = "EKEYREVOKED"
    EKEYREJECTED = "EKEYREJECTED"
    EOWNERDEAD = "EOWNERDEAD"
    ENOTRECOVERABLE = "ENOTRECOVERABLE"
    ERFKILL = "ERFKILL"
    EHWPOISON = "EHWPOISON"

    @classmethod
    def parse(cls, token: str) -> SeccompErrorAction:
        return _lookup(cls, token, BadSeccompErrorAction)

    def format(self) -> str:
        return self.value

    @property
    def is_errno(self) -> bool:
        """Return ``True`` unless this is ``kill`` or ``log``."""
        return self not in (SeccompErrorAction.KILL, SeccompErrorAction.LOG)


# ---------------------------------------------------------------------------
# Two-part values
# ---------------------------------------------------------------------------

class BindMount(NamedTuple):
    """Argument of ``bind``: mount *source* over *target*."""

    source: str
    target: str

    @classmethod
    def parse(cls, text: str) -> BindMount:
        """Split *text* once on the first ``,``."""
        source, sep, target = text.partition(",")
        if not sep:
            raise BadBind(details={"argument": text})
        return cls(source, target)

    def format(self) -> str:
        return f"{self.source},{self.target}"

    def __str__(self) -> str:
        return self.format()


class EnvVar(NamedTuple):
    """Argument of ``env``: set *name* to *value*."""

    name: str
    value: str

    @classmethod
    def parse(cls, text: str) -> EnvVar:
        """Split *text* once on the first ``=``."""
        name, sep, value = text.partition("=")
        if not sep:
            raise BadEnv(details={"argument": text})
        return cls(name, value)

    def format(self) -> str:
        return f"{self.name}={self.value}"

    def __str__(self) -> str:
        return self.format()
