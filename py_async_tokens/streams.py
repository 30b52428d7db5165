import re
import asyncio
import logging

from .errors import EndOfStream, InvalidNumber, ProtocolMisuse

logger = logging.getLogger(__name__)

# Prefixes accepted the way JavaScript's parseInt/parseFloat accept them,
# after ECMAScript white space and line terminators.
_JS_SPACE = r"[\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"
_INT_PREFIX = re.compile(_JS_SPACE + r"([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    _JS_SPACE + r"([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def _separator_byte(sep) -> int:
    if isinstance(sep, int):
        encoded = bytes([sep])
    elif isinstance(sep, str):
        encoded = sep.encode("utf-8")
    else:
        encoded = bytes(sep)
    if len(encoded) != 1:
        raise ValueError(f"separator must encode to a single byte, got {sep!r}")
    return encoded[0]


class StreamReader:
    """Token reader over a chunked byte source.

    Every read is built from :meth:`read_byte`, which in turn waits through
    :meth:`wait_readable`, the only point where a read suspends.  At most
    one wait may be pending, so reads issued by one task are serialized
    without a lock.  The reader is not safe to share between tasks that
    read concurrently.

    Text is decoded as UTF-8 with the ``errors`` policy, ``"replace"`` by
    default, so malformed bytes never fail a read.
    """

    def __init__(self, source, sep, *, errors: str = "replace"):
        self._source = source
        self._sep = _separator_byte(sep)
        self._errors = errors
        self._waiter = None
        source.add_readable_listener(self._on_readable)

    @property
    def source(self):
        return self._source

    def _on_readable(self):
        waiter = self._waiter
        if waiter is None:
            return
        self._waiter = None
        if not waiter.done():
            waiter.set_result(self._source.buffered > 0)

    def _decode(self, data: bytearray) -> str:
        return data.decode("utf-8", errors=self._errors)

    async def wait_readable(self) -> bool:
        """Wait until the source has buffered bytes.

        Returns False when the source has already ended, or when it
        notifies with nothing buffered, which is how the end of data is
        reported.
        """
        if self._waiter is not None:
            raise ProtocolMisuse("wait already pending")
        if self._source.buffered > 0:
            return True
        if self._source.at_eof():
            return False

        waiter = asyncio.get_running_loop().create_future()
        self._waiter = waiter
        try:
            return await waiter
        finally:
            if self._waiter is waiter:
                self._waiter = None

    async def read_byte(self) -> int:
        if not await self.wait_readable():
            logger.debug("End of stream while waiting for a byte")
            raise EndOfStream("EOF reached")
        return self._source.read(1)[0]

    async def read_string(self) -> str:
        """Read up to the separator, which is consumed but not returned."""
        buf = bytearray()
        while True:
            byte = await self.read_byte()
            if byte == self._sep:
                return self._decode(buf)
            buf.append(byte)

    async def read_int(self) -> int:
        raw = await self.read_string()
        match = _INT_PREFIX.match(raw)
        try:
            value = int(match.group(1)) if match else -1
        except ValueError:
            # more digits than int() will convert
            value = -1
        if value < 0:
            logger.debug(f"Rejected integer token {raw!r}")
            raise InvalidNumber(raw)
        return value

    async def read_float(self) -> float:
        raw = await self.read_string()
        match = _FLOAT_PREFIX.match(raw)
        value = float(match.group(1)) if match else -1.0
        if value < 0:
            logger.debug(f"Rejected float token {raw!r}")
            raise InvalidNumber(raw)
        return value

    async def read_fixed_string(self, length: int) -> str:
        if length < 0:
            raise ValueError("length must be non-negative")
        buf = bytearray()
        for _ in range(length):
            buf.append(await self.read_byte())
        return self._decode(buf)
