import time
import asyncio

from py_async_tokens import ByteSource, StreamReader


def bench_tokens(iterations: int = 1000) -> float:
    """Read ``iterations`` lines through py_async_tokens.StreamReader."""
    async def run():
        source = ByteSource()
        reader = StreamReader(source, "\n")
        source.feed_data(b"token\n" * iterations)
        source.feed_eof()
        for _ in range(iterations):
            await reader.read_string()

    start = time.time()
    asyncio.run(run())
    return time.time() - start


def bench_asyncio(iterations: int = 1000) -> float:
    """Read the same lines through asyncio.StreamReader."""
    async def run():
        reader = asyncio.StreamReader()
        reader.feed_data(b"token\n" * iterations)
        reader.feed_eof()
        for _ in range(iterations):
            await reader.readuntil(b"\n")

    start = time.time()
    asyncio.run(run())
    return time.time() - start


def bench(iterations: int = 1000) -> tuple[float, float]:
    """Return runtimes for (py_async_tokens, asyncio)."""
    return bench_tokens(iterations), bench_asyncio(iterations)


if __name__ == "__main__":
    ttime, atime = bench()
    print(f"py_async_tokens: {ttime:.6f}")
    print(f"asyncio: {atime:.6f}")
