"""Directory listing procedures: READDIR and READDIRPLUS."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field

from .core import Error, VfsError
from .file import Attr, Handle

COOKIE_VERIFIER_LEN = 8
"""Length in bytes of a cookie verifier."""

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _check_uint(name: str, value: int, maximum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}")


@dataclass(frozen=True)
class Cookie:
    """Identifies a point in a directory listing."""

    value: int = 0

    def __post_init__(self) -> None:
        _check_uint("cookie", self.value, _U64_MAX)

    def __int__(self) -> int:
        return self.value

    def is_zero(self) -> bool:
        """Whether this cookie marks the start of the directory."""
        return self.value == 0


@dataclass(frozen=True)
class CookieVerifier:
    """Checks that the point named by a :class:`Cookie` is still valid."""

    data: bytes = bytes(COOKIE_VERIFIER_LEN)

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("cookie verifier must be bytes")
        data = bytes(self.data)
        if len(data) != COOKIE_VERIFIER_LEN:
            raise ValueError(
                f"cookie verifier must be exactly {COOKIE_VERIFIER_LEN} bytes"
            )
        object.__setattr__(self, "data", data)

    def is_zero(self) -> bool:
        """Whether every byte of the verifier is zero."""
        return not any(self.data)


def _as_cookie(value: Cookie | int) -> Cookie:
    return value if isinstance(value, Cookie) else Cookie(value)


def _as_verifier(value: CookieVerifier | bytes) -> CookieVerifier:
    return value if isinstance(value, CookieVerifier) else CookieVerifier(value)


@dataclass
class Entry:
    """One directory entry.

    Clients give the file id zero a special meaning, so servers should
    avoid sending it.
    """

    file_id: int
    file_name: str
    cookie: Cookie

    def __post_init__(self) -> None:
        _check_uint("file_id", self.file_id, _U64_MAX)
        self.cookie = _as_cookie(self.cookie)


@dataclass
class ReadDirArgs:
    """Arguments of :meth:`ReadDir.read_dir`.

    The cookie and verifier are zero on the first request and those
    returned by the server afterwards. ``count`` bounds the reply size in
    bytes, XDR overhead included.
    """

    dir: Handle
    cookie: Cookie
    cookie_verifier: CookieVerifier
    count: int

    def __post_init__(self) -> None:
        self.cookie = _as_cookie(self.cookie)
        self.cookie_verifier = _as_verifier(self.cookie_verifier)
        _check_uint("count", self.count, _U32_MAX)


@dataclass
class ReadDirSuccess:
    """A run of directory entries.

    ``eof`` is true when the last entry is the last in the directory, or
    when there are no entries and the cookie pointed at the end.
    """

    cookie_verifier: CookieVerifier
    entries: list[Entry] = field(default_factory=list)
    eof: bool = False
    dir_attr: Attr | None = None

    def __post_init__(self) -> None:
        self.cookie_verifier = _as_verifier(self.cookie_verifier)
        self.entries = list(self.entries)


class ReadDirFailure(VfsError):
    """Raised by :meth:`ReadDir.read_dir`."""

    def __init__(
        self,
        error: Error | int,
        dir_attr: Attr | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_attr = dir_attr


class ReadDir(abc.ABC):
    """Reads entries of a directory in sequence."""

    @abc.abstractmethod
    async def read_dir(self, args: ReadDirArgs) -> ReadDirSuccess:
        """Return entries following ``args.cookie``.

        A cookie that is no longer valid fails with ``Error.BAD_COOKIE``.
        The server may return fewer than ``args.count`` bytes of entries.
        Raises :class:`ReadDirFailure`.
        """


@dataclass
class PlusEntry:
    """A directory entry with the attributes and handle of its object."""

    file_id: int
    file_name: str
    cookie: Cookie
    file_attr: Attr | None = None
    file_handle: Handle | None = None

    def __post_init__(self) -> None:
        _check_uint("file_id", self.file_id, _U64_MAX)
        self.cookie = _as_cookie(self.cookie)


@dataclass
class ReadDirPlusArgs:
    """Arguments of :meth:`ReadDirPlus.read_dir_plus`.

    ``dir_count`` bounds the directory information alone; ``max_count``
    bounds the whole reply, XDR overhead included.
    """

    dir: Handle
    cookie: Cookie
    cookie_verifier: CookieVerifier
    dir_count: int
    max_count: int

    def __post_init__(self) -> None:
        self.cookie = _as_cookie(self.cookie)
        self.cookie_verifier = _as_verifier(self.cookie_verifier)
        _check_uint("dir_count", self.dir_count, _U32_MAX)
        _check_uint("max_count", self.max_count, _U32_MAX)


@dataclass
class ReadDirPlusSuccess:
    """A run of directory entries with their attributes and handles."""

    cookie_verifier: CookieVerifier
    entries: list[PlusEntry] = field(default_factory=list)
    eof: bool = False
    dir_attr: Attr | None = None

    def __post_init__(self) -> None:
        self.cookie_verifier = _as_verifier(self.cookie_verifier)
        self.entries = list(self.entries)


class ReadDirPlusFailure(VfsError):
    """Raised by :meth:`ReadDirPlus.read_dir_plus`."""

    def __init__(
        self,
        error: Error | int,
        dir_attr: Attr | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(error, message)
        self.dir_attr = dir_attr


class ReadDirPlus(abc.ABC):
    """Reads directory entries together with full information about each."""

    @abc.abstractmethod
    async def read_dir_plus(self, args: ReadDirPlusArgs) -> ReadDirPlusSuccess:
        """Return entries following ``args.cookie`` with attributes and handles.

        Raises :class:`ReadDirPlusFailure`.
        """