from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from typing_extensions import TypeIs

DisposeResult: TypeAlias = Awaitable[None] | None
"""Completion signal of a cleanup operation.

``None`` means the cleanup finished synchronously; an awaitable means the
cleanup finishes when the awaitable does.
"""

Disposer: TypeAlias = Callable[[], DisposeResult]
"""A zero-argument cleanup callable, synchronous or asynchronous.

Use a disposer instead of implementing ``Disposable`` when a single cleanup
action is enough.

Examples:
    .. code-block:: python

        def close_socket() -> None:
            sock.close()

        async def drain_queue() -> None:
            await queue.join()

        disposers: list[Disposer] = [close_socket, drain_queue]

"""


def is_disposer(candidate: object) -> TypeIs[Disposer]:
    """Return whether a value can be invoked as a ``Disposer``.

    The candidate must be callable and its signature must accept a call with
    no arguments. Callables whose signature cannot be inspected (some builtins
    and extension types) are accepted as long as they are callable.

    Args:
        candidate: Value being checked.

    """
    if not callable(candidate):
        return False
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind()
    except TypeError:
        return False
    return True


__all__ = ["DisposeResult", "Disposer", "is_disposer"]
