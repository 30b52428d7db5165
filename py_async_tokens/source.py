import os
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


class ByteSource:
    """In-memory byte channel fed by an external producer.

    Chunks are appended with :meth:`feed_data` and the end of data is
    signalled with :meth:`feed_eof`.  Every change notifies the registered
    readable listeners, which then check :attr:`buffered` themselves.
    """

    def __init__(self):
        self._buffer = bytearray()
        self._eof = False
        self._listeners: List[Callable[[], None]] = []

    @property
    def buffered(self) -> int:
        """Number of bytes that can be consumed without waiting."""
        return len(self._buffer)

    def at_eof(self) -> bool:
        return self._eof and not self._buffer

    def add_readable_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def remove_readable_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback()

    def feed_data(self, data: bytes) -> None:
        if self._eof:
            raise RuntimeError("feed_data after feed_eof")
        if not data:
            return
        self._buffer.extend(data)
        logger.debug(f"Received {len(data)} bytes ({len(self._buffer)} buffered)")
        self._notify()

    def feed_eof(self) -> None:
        self._eof = True
        logger.debug(f"End of data ({len(self._buffer)} bytes still buffered)")
        self._notify()

    def read(self, n: int) -> bytes:
        """Consume exactly ``n`` buffered bytes."""
        if n < 0 or n > len(self._buffer):
            raise ValueError(f"cannot read {n} bytes, {len(self._buffer)} buffered")
        data = bytes(self._buffer[:n])
        del self._buffer[:n]
        return data


class FdByteSource(ByteSource):
    """ByteSource fed from a non-blocking file descriptor.

    The descriptor is watched with ``loop.add_reader`` until it reports end
    of file.  It is never closed here; the caller owns it.
    """

    def __init__(self, loop, fd: int):
        super().__init__()
        self._loop = loop
        self._fd = fd
        self._reading = True
        loop.add_reader(fd, self._on_ready)

    def _on_ready(self):
        try:
            data = os.read(self._fd, READ_CHUNK_SIZE)
        except BlockingIOError:
            return
        if not data:
            self.close()
            self.feed_eof()
        else:
            self.feed_data(data)

    def close(self) -> None:
        """Stop watching the descriptor."""
        if self._reading:
            self._reading = False
            self._loop.remove_reader(self._fd)
