"""Focused example: an idempotent disposable, sync or async."""

from __future__ import annotations

import asyncio

from disposal import Disposable, adispose, is_disposable


class Connection(Disposable):
    def __init__(self) -> None:
        self.is_disposed = False
        self.closed = 0

    async def dispose(self) -> None:
        if self.is_disposed:
            return
        self.is_disposed = True
        await asyncio.sleep(0)
        self.closed += 1


class Buffer:
    def __init__(self) -> None:
        self.items = [1, 2, 3]

    def dispose(self) -> None:
        self.items.clear()


async def main() -> None:
    connection = Connection()
    print(f"disposed_before={connection.is_disposed}")  # => disposed_before=False

    await connection.dispose()
    await connection.dispose()
    print(
        f"disposed_after={connection.is_disposed} closed={connection.closed}",
    )  # => disposed_after=True closed=1

    buffer = Buffer()
    print(f"structural={is_disposable(buffer)}")  # => structural=True

    await adispose(buffer)
    print(f"buffer_items={len(buffer.items)}")  # => buffer_items=0


if __name__ == "__main__":
    asyncio.run(main())
