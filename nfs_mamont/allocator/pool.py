"""Bounded allocation of buffers for user data transfer."""

from __future__ import annotations

import abc
import asyncio

from .slice import Slice


class Allocator(abc.ABC):
    """Hands out :class:`Slice` objects of a requested size."""

    @abc.abstractmethod
    async def allocate(self, size: int) -> Slice:
        """Return a slice of ``size`` bytes, waiting until enough buffers are free.

        Raises ``ValueError`` if ``size`` is not positive or exceeds the
        allocator capacity.
        """


class Pool(Allocator):
    """A fixed set of equally sized buffers that slices borrow and give back."""

    def __init__(self, buffer_size: int, buffer_count: int) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be positive")
        if buffer_count < 1:
            raise ValueError("buffer count must be positive")
        self.buffer_size = buffer_size
        self.buffer_count = buffer_count
        self._free: asyncio.Queue[bytearray] = asyncio.Queue()
        for _ in range(buffer_count):
            self._free.put_nowait(bytearray(buffer_size))
        self._lock = asyncio.Lock()

    @property
    def capacity(self) -> int:
        """Total number of bytes the pool can hand out at once."""
        return self.buffer_size * self.buffer_count

    async def allocate(self, size: int) -> Slice:
        if size < 1:
            raise ValueError("size must be positive")
        if size > self.capacity:
            raise ValueError("cannot allocate more than allocator capacity")

        buffers: list[bytearray] = []
        async with self._lock:
            remaining = size
            try:
                while remaining > 0:
                    buffer = await self._free.get()
                    if len(buffer) != self.buffer_size:
                        raise RuntimeError("pool received a buffer of the wrong size")
                    remaining = max(remaining - len(buffer), 0)
                    buffers.append(buffer)
            except BaseException:
                for buffer in buffers:
                    self._free.put_nowait(buffer)
                raise

        return Slice(buffers, 0, size, self._free.put_nowait)