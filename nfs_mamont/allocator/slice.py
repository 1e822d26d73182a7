"""A byte range laid over a list of fixed buffers."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

BufferSink = Callable[[bytearray], object]


class Slice:
    """A list of buffers limited to the byte range ``[start, end)``.

    When released, every buffer is zeroed and handed to ``sink`` so the
    owner of the buffers can reuse them.
    """

    def __init__(
        self,
        buffers: Iterable[bytearray],
        start: int,
        end: int,
        sink: BufferSink,
    ) -> None:
        buffers = list(buffers)
        if start > end:
            raise ValueError("start should not be greater than end")
        if start < 0:
            raise ValueError("start should not be negative")
        if any(len(buffer) == 0 for buffer in buffers):
            raise ValueError("buffers must not be empty")
        total = sum(len(buffer) for buffer in buffers)
        if start > total:
            raise ValueError("cannot index list as slice from start")
        if end > total:
            raise ValueError("cannot index list as slice to end")
        self._buffers = buffers
        self._start = start
        self._end = end
        self._sink = sink

    def __len__(self) -> int:
        return self._end - self._start if self._buffers else 0

    def _chunks(self, writable: bool) -> Iterator[memoryview]:
        start, end = self._start, self._end
        for buffer in self._buffers:
            if start == end:
                return
            size = len(buffer)
            if size > start:
                view = memoryview(buffer)
                if not writable:
                    view = view.toreadonly()
                yield view[start:min(end, size)]
            start = max(start - size, 0)
            end = max(end - size, 0)

    def iter(self) -> Iterator[memoryview]:
        """Yield read-only views of the bytes inside the range, buffer by buffer."""
        return self._chunks(writable=False)

    def iter_mut(self) -> Iterator[memoryview]:
        """Yield writable views of the bytes inside the range, buffer by buffer."""
        return self._chunks(writable=True)

    def __iter__(self) -> Iterator[memoryview]:
        return self.iter()

    def release(self) -> None:
        """Zero every buffer and hand it back to the sink. Safe to call twice."""
        buffers, self._buffers = self._buffers, []
        for buffer in buffers:
            buffer[:] = bytes(len(buffer))
            self._sink(buffer)

    def __enter__(self) -> Slice:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()

    def __del__(self) -> None:
        try:
            self.release()
        except Exception:
            pass