import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio

import pytest

from py_async_tokens import EndOfStream, create_subprocess_exec


def test_subprocess_tokens():
    async def run():
        proc = await create_subprocess_exec("printf", "42\\n3.5\\nhello\\n")
        try:
            values = [
                await proc.stdout.read_int(),
                await proc.stdout.read_float(),
                await proc.stdout.read_string(),
            ]
            with pytest.raises(EndOfStream):
                await proc.stdout.read_string()
            assert await proc.wait() == 0
            assert proc.returncode == 0
        finally:
            proc.close()
        return values

    assert asyncio.run(run()) == [42, 3.5, "hello"]


def test_subprocess_custom_separator_with_stdin():
    async def run():
        proc = await create_subprocess_exec(
            "tr", "\\n", "\\000", stdin=asyncio.subprocess.PIPE, sep="\x00"
        )
        try:
            proc.stdin.write(b"first\nsecond\n")
            await proc.stdin.drain()
            proc.stdin.close()
            values = [await proc.stdout.read_string(), await proc.stdout.read_string()]
            await proc.wait()
        finally:
            proc.close()
        return values

    assert asyncio.run(run()) == ["first", "second"]


def test_subprocess_rejects_stdout():
    async def run():
        await create_subprocess_exec("true", stdout=asyncio.subprocess.PIPE)

    with pytest.raises(TypeError):
        asyncio.run(run())
