from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from typing import TypeAlias, cast

from disposal.contracts import Disposable
from disposal.exceptions import (
    DisposalAsyncInSyncContextError,
    DisposalChainError,
    DisposalInvalidTargetError,
)
from disposal.types import DisposeResult, Disposer

logger = logging.getLogger(__name__)

DisposalTarget: TypeAlias = Disposable | Disposer
"""Anything the completion helpers accept: a ``Disposable`` or a ``Disposer``."""


def _invoke(target: object) -> DisposeResult:
    if isinstance(target, type):
        msg = f"Cannot dispose class {target.__qualname__}; pass an instance instead."
        raise DisposalInvalidTargetError(msg)
    # Objects exposing a callable ``dispose`` win over ``__call__``.
    method = getattr(target, "dispose", None)
    if callable(method):
        return cast("Disposer", method)()
    if callable(target):
        return cast("Disposer", target)()
    msg = (
        f"Cannot dispose {target!r}: expected an object with a 'dispose' method "
        "or a zero-argument callable."
    )
    raise DisposalInvalidTargetError(msg)


def dispose(target: DisposalTarget) -> None:
    """Dispose a target whose cleanup completes synchronously.

    Args:
        target: ``Disposable`` to dispose or ``Disposer`` to invoke.

    Raises:
        DisposalInvalidTargetError: If ``target`` is a class, or has neither a
            callable ``dispose`` method nor is callable itself.
        DisposalAsyncInSyncContextError: If the cleanup returned an awaitable.
            Returned coroutines are closed before raising.

    """
    result = _invoke(target)
    if not inspect.isawaitable(result):
        return
    if inspect.iscoroutine(result):
        result.close()
    msg = f"Disposal of {target!r} completes asynchronously; use 'await adispose(...)'."
    raise DisposalAsyncInSyncContextError(msg)


async def adispose(target: DisposalTarget) -> None:
    """Dispose a target and wait until its cleanup has completed.

    Synchronous and asynchronous cleanups are awaited the same way, so callers
    never need to know which kind they hold.

    Args:
        target: ``Disposable`` to dispose or ``Disposer`` to invoke.

    Raises:
        DisposalInvalidTargetError: If ``target`` is a class, or has neither a
            callable ``dispose`` method nor is callable itself.

    Examples:
        .. code-block:: python

            await adispose(connection)
            await adispose(lambda: timer.cancel())

    """
    result = _invoke(target)
    if inspect.isawaitable(result):
        await result


def _ordered(targets: Iterable[DisposalTarget], *, reverse: bool) -> list[DisposalTarget]:
    ordered = list(targets)
    if reverse:
        ordered.reverse()
    return ordered


def _raise_collected(errors: list[Exception]) -> None:
    if errors:
        raise DisposalChainError(errors) from errors[0]


def dispose_all(targets: Iterable[DisposalTarget], *, reverse: bool = True) -> None:
    """Dispose every target synchronously, continuing past failing steps.

    Args:
        targets: Targets in acquisition order.
        reverse: Dispose in reverse acquisition order. Pass ``False`` to keep
            the given order.

    Raises:
        DisposalChainError: After all steps ran, if any of them failed. A step
            that completes asynchronously counts as a failure with
            ``DisposalAsyncInSyncContextError``.

    """
    ordered = _ordered(targets, reverse=reverse)
    logger.debug("Disposing %d targets synchronously", len(ordered))
    errors: list[Exception] = []
    for target in ordered:
        try:
            dispose(target)
        except Exception as error:
            logger.warning("Disposal of %r failed", target, exc_info=error)
            errors.append(error)
    _raise_collected(errors)


async def adispose_all(targets: Iterable[DisposalTarget], *, reverse: bool = True) -> None:
    """Dispose every target one after another, continuing past failing steps.

    Steps run sequentially so that a later step never observes an earlier one
    half-finished. Cancellation and other ``BaseException`` subclasses are not
    collected and propagate immediately.

    Args:
        targets: Targets in acquisition order.
        reverse: Dispose in reverse acquisition order. Pass ``False`` to keep
            the given order.

    Raises:
        DisposalChainError: After all steps ran, if any of them failed.

    Examples:
        .. code-block:: python

            async def on_dispose(self) -> None:
                await adispose_all([self._socket, self._parser, self._flush])

    """
    ordered = _ordered(targets, reverse=reverse)
    logger.debug("Disposing %d targets", len(ordered))
    errors: list[Exception] = []
    for target in ordered:
        try:
            await adispose(target)
        except Exception as error:
            logger.warning("Disposal of %r failed", target, exc_info=error)
            errors.append(error)
    _raise_collected(errors)


__all__ = [
    "DisposalTarget",
    "adispose",
    "adispose_all",
    "dispose",
    "dispose_all",
]
