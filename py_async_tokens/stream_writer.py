import os


class StreamWriter:
    """Buffered writer over a non-blocking file object."""

    def __init__(self, loop, fileobj):
        self._loop = loop
        self._fileobj = fileobj
        self._fd = fileobj.fileno()
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        self._buffer.extend(data)

    @staticmethod
    def _wakeup(fut):
        if not fut.done():
            fut.set_result(None)

    async def drain(self):
        while self._buffer:
            try:
                written = os.write(self._fd, self._buffer)
            except BlockingIOError:
                fut = self._loop.create_future()
                self._loop.add_writer(self._fd, self._wakeup, fut)
                try:
                    await fut
                finally:
                    self._loop.remove_writer(self._fd)
                continue
            del self._buffer[:written]

    def close(self) -> None:
        self._fileobj.close()
