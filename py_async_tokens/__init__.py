"""Asynchronous token reading over chunked byte sources."""

from .errors import EndOfStream, InvalidNumber, ProtocolMisuse
from .source import ByteSource, FdByteSource
from .streams import StreamReader
from .stream_writer import StreamWriter
from .subprocess import Subprocess, create_subprocess_exec
from .highlevel import open_connection

__all__ = [
    "ByteSource",
    "FdByteSource",
    "StreamReader",
    "StreamWriter",
    "Subprocess",
    "create_subprocess_exec",
    "open_connection",
    "EndOfStream",
    "InvalidNumber",
    "ProtocolMisuse",
]
