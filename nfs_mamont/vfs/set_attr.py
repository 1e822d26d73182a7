"""The SETATTR procedure: changing attributes of a file system object."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field

from .core import Error, VfsError, WccData
from .file import _U64_MAX, Handle, Time, _require_uint, _require_uints


@dataclass(frozen=True)
class Guard:
    """Expected ctime of the object; the update happens only if it matches."""

    ctime: Time


class SetTimeHow(enum.IntEnum):
    """How a timestamp is to be updated."""

    DONT_CHANGE = 0
    TO_SERVER = 1
    TO_CLIENT = 2


@dataclass(frozen=True)
class SetTime:
    """Strategy for updating one timestamp, with the time when the client gives it."""

    how: SetTimeHow = SetTimeHow.DONT_CHANGE
    time: Time | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "how", SetTimeHow(self.how))
        if self.how is SetTimeHow.TO_CLIENT:
            if self.time is None:
                raise ValueError("a client time is required")
        elif self.time is not None:
            raise ValueError("a time is only given when setting to client time")

    @classmethod
    def dont_change(cls) -> SetTime:
        """Leave the timestamp as it is."""
        return cls(SetTimeHow.DONT_CHANGE)

    @classmethod
    def to_server(cls) -> SetTime:
        """Set the timestamp to the current server time."""
        return cls(SetTimeHow.TO_SERVER)

    @classmethod
    def to_client(cls, time: Time) -> SetTime:
        """Set the timestamp to a time supplied by the client."""
        return cls(SetTimeHow.TO_CLIENT, time)


@dataclass
class NewAttr:
    """Attributes to update; ``None`` leaves an attribute unchanged."""

    mode: int | None = None
    uid: int | None = None
    gid: int | None = None
    size: int | None = None
    atime: SetTime = field(default_factory=SetTime.dont_change)
    mtime: SetTime = field(default_factory=SetTime.dont_change)

    def __post_init__(self) -> None:
        _require_uints(self, ("mode", "uid", "gid"), optional=True)
        _require_uint("size", self.size, _U64_MAX, optional=True)


@dataclass
class SetAttrArgs:
    """Arguments of :meth:`SetAttr.set_attr`."""

    file: Handle
    new_attr: NewAttr = field(default_factory=NewAttr)
    guard: Guard | None = None


class SetAttrFailure(VfsError):
    """Raised by :meth:`SetAttr.set_attr`; carries weak cache consistency data."""

    def __init__(self, error: Error | int, wcc_data: WccData | None = None, message: str | None = None) -> None:
        super().__init__(error, message)
        self.wcc_data = wcc_data if wcc_data is not None else WccData()


class SetAttr(abc.ABC):
    """Changes attributes of a file system object."""

    @abc.abstractmethod
    async def set_attr(self, args: SetAttrArgs) -> WccData:
        """Apply ``args.new_attr`` to the object and return its cache data.

        If a guard is given and the object's ctime differs from it, the
        attributes must be left as they are and :class:`SetAttrFailure`
        with ``Error.NOT_SYNC`` raised. A size change truncates or extends
        the file with zero bytes and changes its mtime. The operation is
        not atomic: a failure may leave attributes partially changed.
        """