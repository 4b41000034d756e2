"""Reusable checks that an implementation honors the disposal contract.

The checks are coroutines so synchronous and asynchronous implementations go
through the same path. Failures raise ``DisposalContractViolationError``, which
test runners report as a failed assertion.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass

from disposal.completion import adispose
from disposal.contracts import ChainedDisposable, Disposable, is_chained_disposable, is_disposable
from disposal.exceptions import DisposalContractViolationError, DisposalInvalidTargetError
from disposal.types import DisposeResult, Disposer, is_disposer

logger = logging.getLogger(__name__)

_HOOK_NAME = "on_dispose"


@dataclass(frozen=True, slots=True, kw_only=True)
class DisposalContractChecker:
    """Verify disposal guarantees against concrete implementations.

    Args:
        repeat: Total number of ``dispose`` calls issued per check. Must be at
            least 2, otherwise idempotency is never exercised.
        concurrent: Issue all calls concurrently on the running event loop
            instead of one after another.

    Examples:
        .. code-block:: python

            checker = DisposalContractChecker(repeat=5)
            resource = Resource()
            await checker.check_disposable(
                resource,
                cleanup_count=lambda: resource.cleanup_count,
                is_disposed=lambda: resource.is_disposed,
            )

    """

    repeat: int = 3
    concurrent: bool = False

    def __post_init__(self) -> None:
        if self.repeat < 2:
            msg = f"repeat must be at least 2 to exercise idempotency, got {self.repeat}."
            raise ValueError(msg)

    async def check_disposable(
        self,
        target: Disposable,
        *,
        cleanup_count: Callable[[], int],
        is_disposed: Callable[[], bool] | None = None,
    ) -> None:
        """Check that repeated ``dispose`` calls run cleanup exactly once.

        Args:
            target: Fresh, not yet disposed object under test.
            cleanup_count: Returns how many times the target's cleanup ran.
            is_disposed: Returns the target's disposed flag, when it has one.

        Raises:
            DisposalContractViolationError: If cleanup ran zero or several
                times, a call raised, or the disposed flag is wrong before or
                after disposal.

        """
        if not is_disposable(target):
            raise DisposalContractViolationError(target, "it has no 'dispose' method")
        logger.debug(
            "Checking disposal of %r (repeat=%d, concurrent=%s)",
            target,
            self.repeat,
            self.concurrent,
        )
        if is_disposed is not None and is_disposed():
            raise DisposalContractViolationError(
                target,
                "it reports being disposed before 'dispose' was called",
            )
        self._expect_cleanup_count(target, cleanup_count, 0, after="construction")

        if self.concurrent:
            await asyncio.gather(*(self._dispose_once(target) for _ in range(self.repeat)))
        else:
            await self._dispose_once(target)
            self._expect_cleanup_count(target, cleanup_count, 1, after="the first call")
            for _ in range(self.repeat - 1):
                await self._dispose_once(target)

        self._expect_cleanup_count(target, cleanup_count, 1, after=f"{self.repeat} calls")
        if is_disposed is not None and not is_disposed():
            raise DisposalContractViolationError(
                target,
                "it does not report being disposed after 'dispose' completed",
            )

    async def check_chained_disposable(
        self,
        target: ChainedDisposable,
        *,
        is_disposed: Callable[[], bool] | None = None,
    ) -> None:
        """Check that ``on_dispose`` runs exactly once across repeated disposal.

        The instance's ``on_dispose`` is wrapped for the duration of the check
        and restored afterwards. When ``is_disposed`` is given, the check also
        verifies that the flag was already set when the hook ran.

        Args:
            target: Fresh, not yet disposed object under test.
            is_disposed: Returns the target's disposed flag, when it has one.

        Raises:
            DisposalContractViolationError: If the hook ran zero or several
                times, or ran before the disposed flag was set.
            DisposalInvalidTargetError: If the hook cannot be wrapped on this
                instance.

        """
        if not is_chained_disposable(target):
            raise DisposalContractViolationError(
                target,
                f"it does not expose both 'dispose' and '{_HOOK_NAME}'",
            )

        original_hook = target.on_dispose
        had_own_hook = _HOOK_NAME in getattr(target, "__dict__", {})
        hook_calls = 0
        flag_at_hook: list[bool] = []

        def counting_hook() -> DisposeResult:
            nonlocal hook_calls
            hook_calls += 1
            if is_disposed is not None:
                flag_at_hook.append(is_disposed())
            return original_hook()

        try:
            setattr(target, _HOOK_NAME, counting_hook)  # noqa: B010
        except AttributeError as error:
            msg = f"Cannot wrap '{_HOOK_NAME}' on {target!r}; the instance has no '__dict__'."
            raise DisposalInvalidTargetError(msg) from error

        try:
            await self.check_disposable(
                target,
                cleanup_count=lambda: hook_calls,
                is_disposed=is_disposed,
            )
        finally:
            if had_own_hook:
                setattr(target, _HOOK_NAME, original_hook)  # noqa: B010
            else:
                with suppress(AttributeError):
                    delattr(target, _HOOK_NAME)

        if not all(flag_at_hook):
            raise DisposalContractViolationError(
                target,
                f"'{_HOOK_NAME}' ran before the disposed flag was set",
            )

    async def check_disposer(self, target: Disposer) -> None:
        """Check that a disposer takes no arguments and its completion can be awaited.

        Args:
            target: Disposer under test. It is invoked once.

        Raises:
            DisposalContractViolationError: If the disposer needs arguments or
                raises while running.

        """
        if not is_disposer(target):
            raise DisposalContractViolationError(target, "it is not callable without arguments")
        try:
            await adispose(target)
        except Exception as error:
            raise DisposalContractViolationError(
                target,
                f"invoking it raised {type(error).__name__}: {error}",
            ) from error

    async def _dispose_once(self, target: Disposable) -> None:
        try:
            await adispose(target)
        except Exception as error:
            raise DisposalContractViolationError(
                target,
                f"'dispose' raised {type(error).__name__}: {error}",
            ) from error

    @staticmethod
    def _expect_cleanup_count(
        target: Disposable,
        cleanup_count: Callable[[], int],
        expected: int,
        *,
        after: str,
    ) -> None:
        actual = cleanup_count()
        if actual != expected:
            raise DisposalContractViolationError(
                target,
                f"cleanup ran {actual} time(s) after {after}, expected {expected}",
            )


__all__ = ["DisposalContractChecker"]
