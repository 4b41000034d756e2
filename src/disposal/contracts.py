from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from typing_extensions import TypeIs

from disposal.types import DisposeResult


@runtime_checkable
class Disposable(Protocol):
    """Protocol for objects that release resources through ``dispose``.

    Conform structurally (any object with a ``dispose`` method) or inherit the
    protocol explicitly; explicit subclasses that omit ``dispose`` cannot be
    instantiated.

    Contract:
        - ``dispose`` is idempotent. Calls after the first have no additional
          effect and never re-run cleanup logic.
        - ``dispose`` never raises because the object is already disposed.
        - After disposal the object is unusable; rejecting or ignoring further
          operations is up to the implementer.
        - Completion may be synchronous (return ``None``) or deferred (return
          an awaitable). Callers that need to wait uniformly use
          ``await adispose(obj)``.

    Implementers own their synchronization when ``dispose`` can be called
    concurrently. Only the observable effect matters: one cleanup execution.

    Examples:
        .. code-block:: python

            class Ticker(Disposable):
                def __init__(self) -> None:
                    self._task: asyncio.Task[None] | None = asyncio.create_task(tick())

                async def dispose(self) -> None:
                    if self._task is None:
                        return
                    task, self._task = self._task, None
                    task.cancel()
                    with suppress(asyncio.CancelledError):
                        await task

    """

    @abstractmethod
    def dispose(self) -> DisposeResult:
        """Dispose this object and release its resources.

        Implementation guidelines:
            - Check the disposed flag before doing any work.
            - Release resources in reverse order of acquisition when possible.
            - Handle failures of individual cleanup steps so the remaining
              steps still run (``adispose_all`` does this for a sequence).
            - Set the disposed flag so further use can be rejected.

        Returns:
            ``None`` when cleanup finished synchronously, otherwise an
            awaitable that completes when cleanup is finished.

        """


@runtime_checkable
class ChainedDisposable(Disposable, Protocol):
    """Protocol for disposables that delegate cleanup to the ``on_dispose`` hook.

    Overriding ``dispose`` directly means re-implementing idempotency every
    time. Instead, a shared base implementation owns ``dispose`` and runs this
    fixed flow:

    1. Return early when already disposed.
    2. Set the disposed flag.
    3. Call ``on_dispose`` (the only customization point).
    4. Tear down dependent resources owned by the base, if any.

    This package defines the shape only; the base implementation is provided
    by the framework built on top of it. Whatever base you use must keep the
    ordering above: the flag is set before ``on_dispose`` runs, and
    ``on_dispose`` runs before the base disposes dependent resources.
    ``DisposalContractChecker.check_chained_disposable`` verifies this for a
    base that exposes its flag.

    Examples:
        .. code-block:: python

            class Pool(DisposableBase, ChainedDisposable):
                def __init__(self) -> None:
                    super().__init__()
                    self._connections: list[Disposable] = []

                async def on_dispose(self) -> None:
                    await adispose_all(self._connections)
                    self._connections.clear()

    """

    def on_dispose(self) -> DisposeResult:
        """Run custom cleanup as part of the owning base's disposal flow.

        Called by the base implementation exactly once, after the disposed
        flag is set and before dependent resources are disposed. Do not call
        it directly and do not check for idempotency here.

        The default implementation does nothing. Overrides may be synchronous
        or asynchronous, and should handle their own failures so that the
        rest of the disposal chain still runs.

        Returns:
            ``None`` when cleanup finished synchronously, otherwise an
            awaitable that completes when cleanup is finished.

        """
        return None


def is_disposable(candidate: object) -> TypeIs[Disposable]:
    """Return whether a value exposes the ``Disposable`` surface."""
    return isinstance(candidate, Disposable)


def is_chained_disposable(candidate: object) -> TypeIs[ChainedDisposable]:
    """Return whether a value exposes both ``dispose`` and ``on_dispose``."""
    return isinstance(candidate, ChainedDisposable)


__all__ = [
    "ChainedDisposable",
    "Disposable",
    "is_chained_disposable",
    "is_disposable",
]
