import asyncio

from py_async_tokens import ByteSource, StreamReader

SAMPLE = b"12\n3.5\nhello\n\xe2\x82\xac\n\n" * 50


async def tokens_lines(data: bytes) -> list:
    source = ByteSource()
    reader = StreamReader(source, "\n")
    source.feed_data(data)
    source.feed_eof()
    return [await reader.read_string() for _ in range(data.count(b"\n"))]


async def asyncio_lines(data: bytes) -> list:
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    lines = []
    for _ in range(data.count(b"\n")):
        line = await reader.readuntil(b"\n")
        lines.append(line[:-1].decode("utf-8", errors="replace"))
    return lines


def validate(data: bytes = SAMPLE) -> bool:
    """Check that both readers split ``data`` into the same tokens."""
    return asyncio.run(tokens_lines(data)) == asyncio.run(asyncio_lines(data))


def main():
    ok = validate()
    print("tokens match" if ok else "tokens differ")
    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
