"""Focused example: a base class owns idempotency, subclasses override on_dispose."""

from __future__ import annotations

import asyncio

from disposal import ChainedDisposable, Disposer, adispose, adispose_all


class DisposableBase(ChainedDisposable):
    def __init__(self) -> None:
        self.is_disposed = False
        self.attached: list[Disposer] = []

    async def dispose(self) -> None:
        if self.is_disposed:
            return
        self.is_disposed = True
        await adispose(self.on_dispose)
        await adispose_all(self.attached)


class Session(DisposableBase):
    def __init__(self, log: list[str]) -> None:
        super().__init__()
        self.log = log
        self.attached.append(lambda: log.append("attached"))

    async def on_dispose(self) -> None:
        self.log.append(f"on_dispose(disposed={self.is_disposed})")


async def main() -> None:
    log: list[str] = []
    session = Session(log)

    await session.dispose()
    await session.dispose()

    print(f"order={log}")  # => order=['on_dispose(disposed=True)', 'attached']


if __name__ == "__main__":
    asyncio.run(main())
