import os
import asyncio
import logging

from .source import FdByteSource
from .streams import StreamReader

logger = logging.getLogger(__name__)


class Subprocess:
    """Child process whose stdout is read through a :class:`StreamReader`."""

    def __init__(self, proc, stdout, stdout_fd):
        self._proc = proc
        self.stdout = stdout
        self._stdout_fd = stdout_fd

    @property
    def stdin(self):
        return self._proc.stdin

    @property
    def pid(self):
        return self._proc.pid

    @property
    def returncode(self):
        return self._proc.returncode

    async def wait(self):
        return await self._proc.wait()

    def close(self):
        """Stop reading and close the read end of the stdout pipe."""
        if self._stdout_fd is not None:
            self.stdout.source.close()
            os.close(self._stdout_fd)
            self._stdout_fd = None


async def create_subprocess_exec(*cmd, sep="\n", errors="replace", **kwargs):
    """Spawn ``cmd`` and tokenize its stdout on ``sep``.

    Other keyword arguments are passed to
    :func:`asyncio.create_subprocess_exec`; ``stdout`` may not be given.
    """
    if "stdout" in kwargs:
        raise TypeError("stdout is managed by create_subprocess_exec")
    loop = asyncio.get_running_loop()
    read_fd, write_fd = os.pipe()
    try:
        proc = await asyncio.create_subprocess_exec(*cmd, stdout=write_fd, **kwargs)
    except BaseException:
        os.close(read_fd)
        raise
    finally:
        os.close(write_fd)
    logger.debug(f"Started {cmd[0]} (pid {proc.pid})")

    os.set_blocking(read_fd, False)
    reader = StreamReader(FdByteSource(loop, read_fd), sep, errors=errors)
    return Subprocess(proc, reader, read_fd)
