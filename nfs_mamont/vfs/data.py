"""Data transfer procedures: READ, WRITE and COMMIT."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field

from ..allocator.slice import Slice
from .core import Error, VfsError, WccData
from .file import _U64_MAX, Attr, Handle, _fixed_bytes, _require_uint

VERIFIER_LEN = 8


@dataclass
class _FileRange:
    """A file handle with a 64-bit offset and a 32-bit count."""

    file: Handle
    offset: int
    count: int

    def __post_init__(self) -> None:
        _require_uint("offset", self.offset, _U64_MAX)
        _require_uint("count", self.count)


@dataclass
class ReadArgs(_FileRange):
    """Arguments of :meth:`Read.read`."""


@dataclass
class ReadSuccess:
    """Data read, its length, and whether the read reached end of file."""

    count: int
    eof: bool
    data: Slice
    file_attr: Attr | None = None

    def __post_init__(self) -> None:
        _require_uint("count", self.count)


class ReadFailure(VfsError):
    """Raised by :meth:`Read.read`."""

    def __init__(self, error: Error | int, file_attr: Attr | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.file_attr = file_attr


class Read(abc.ABC):
    """Reads data from a file."""

    @abc.abstractmethod
    async def read(self, args: ReadArgs) -> ReadSuccess:
        """Read up to ``args.count`` bytes at ``args.offset``.

        The file must be a regular file, otherwise ``Error.INVALID_ARGUMENT``.
        An offset at or past the end of file gives zero bytes with ``eof``
        set; a count of zero succeeds with no data. Raises :class:`ReadFailure`.
        """


class StableHow(enum.IntEnum):
    """How much of a write must reach stable storage before replying."""

    UNSTABLE = 0
    DATA_SYNC = 1
    FILE_SYNC = 2


@dataclass(frozen=True)
class WriteVerifier:
    """Cookie that lets a client detect a server reboot between writes and commit."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed_bytes("verifier", self.data, VERIFIER_LEN))


@dataclass
class WriteArgsPartial:
    """The fields of :class:`WriteArgs` that precede the data."""

    file: Handle
    offset: int
    size: int
    stable: StableHow

    def __post_init__(self) -> None:
        _require_uint("offset", self.offset, _U64_MAX)
        _require_uint("size", self.size)
        self.stable = StableHow(self.stable)


@dataclass
class WriteArgs(WriteArgsPartial):
    """Arguments of :meth:`Write.write`."""

    data: Slice = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.data, Slice):
            raise TypeError("write data must be a Slice")


@dataclass
class WriteSuccess:
    """Bytes written, the commitment level reached, and the server verifier."""

    count: int
    committed: StableHow
    verifier: WriteVerifier
    file_wcc: WccData = field(default_factory=WccData)

    def __post_init__(self) -> None:
        _require_uint("count", self.count)
        self.committed = StableHow(self.committed)


class WriteFailure(VfsError):
    """Raised by :meth:`Write.write`."""

    def __init__(self, error: Error | int, wcc_data: WccData | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.wcc_data = wcc_data if wcc_data is not None else WccData()


class Write(abc.ABC):
    """Writes data to a file."""

    @abc.abstractmethod
    async def write(self, args: WriteArgs) -> WriteSuccess:
        """Write ``args.data`` at ``args.offset``.

        The file must be a regular file, otherwise ``Error.INVALID_ARGUMENT``.
        Some implementations report an exceeded quota as ``Error.NO_SPACE``.
        Raises :class:`WriteFailure`.
        """


@dataclass
class CommitArgs(_FileRange):
    """Arguments of :meth:`Commit.commit`; a count of 0 flushes to end of file."""


@dataclass
class CommitSuccess:
    """Server verifier and cache data after flushing."""

    verifier: WriteVerifier
    file_wcc: WccData = field(default_factory=WccData)


class CommitFailure(VfsError):
    """Raised by :meth:`Commit.commit`."""

    def __init__(self, error: Error | int, file_wcc: WccData | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.file_wcc = file_wcc if file_wcc is not None else WccData()


class Commit(abc.ABC):
    """Flushes previously written data to stable storage."""

    @abc.abstractmethod
    async def commit(self, args: CommitArgs) -> CommitSuccess:
        """Flush data in the given range; raises :class:`CommitFailure`."""