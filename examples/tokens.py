import asyncio

from py_async_tokens import create_subprocess_exec


async def main():
    # The child answers with a byte count followed by that many bytes.
    proc = await create_subprocess_exec("printf", "11\\nhello world")
    try:
        length = await proc.stdout.read_int()
        print(await proc.stdout.read_fixed_string(length))
        await proc.wait()
    finally:
        proc.close()


if __name__ == "__main__":
    asyncio.run(main())
