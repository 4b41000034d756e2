"""Focused example: plain callables as disposers, awaited uniformly."""

from __future__ import annotations

import asyncio

from disposal import Disposer, adispose, is_disposer


async def main() -> None:
    state = {"timer": "running", "queue": "open"}

    def stop_timer() -> None:
        state["timer"] = "stopped"

    async def close_queue() -> None:
        await asyncio.sleep(0)
        state["queue"] = "closed"

    disposers: list[Disposer] = [stop_timer, close_queue]
    for disposer in disposers:
        await adispose(disposer)

    print(f"state={state}")  # => state={'timer': 'stopped', 'queue': 'closed'}

    def close(handle: int) -> None:
        del handle

    print(
        f"stop_timer_is_disposer={is_disposer(stop_timer)} close_is_disposer={is_disposer(close)}",
    )  # => stop_timer_is_disposer=True close_is_disposer=False


if __name__ == "__main__":
    asyncio.run(main())
