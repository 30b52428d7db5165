import os
import socket
import asyncio
import logging

from .source import FdByteSource
from .streams import StreamReader
from .stream_writer import StreamWriter

logger = logging.getLogger(__name__)


async def open_connection(host, port, sep="\n", *, loop=None):
    """Connect to ``host:port`` and return a ``(reader, writer)`` pair.

    The reader splits incoming data on ``sep``.  Closing the writer closes
    the socket.
    """
    if loop is None:
        loop = asyncio.get_running_loop()
    infos = await loop.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    family, type_, proto, _, sockaddr = infos[0]
    sock = socket.socket(family, type_, proto)
    sock.setblocking(False)
    try:
        sock.connect(sockaddr)
    except BlockingIOError:
        pass
    except OSError:
        sock.close()
        raise

    fut = loop.create_future()
    def on_connected():
        loop.remove_writer(sock.fileno())
        err = sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)
        if err != 0:
            fut.set_exception(OSError(err, os.strerror(err)))
        else:
            fut.set_result(None)
    loop.add_writer(sock.fileno(), on_connected)
    try:
        await fut
    except BaseException:
        loop.remove_writer(sock.fileno())
        sock.close()
        raise
    logger.debug(f"Connected to {sockaddr}")

    reader = StreamReader(FdByteSource(loop, sock.fileno()), sep)
    writer = StreamWriter(loop, sock)
    return reader, writer
