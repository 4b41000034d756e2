from __future__ import annotations

from collections.abc import Sequence


class DisposalError(Exception):
    """Represent a base class for all disposal-specific failures.

    Catch this type when you want to handle any disposal error path without
    matching each concrete exception class individually.
    """


class DisposalInvalidTargetError(DisposalError):
    """Signal a value that cannot be disposed through the helper functions.

    Raised by ``dispose``/``adispose`` when the target neither exposes a
    ``dispose`` method nor is callable, and by
    ``DisposalContractChecker.check_chained_disposable`` when the target's
    ``on_dispose`` hook cannot be instrumented (for example on ``__slots__``
    classes without ``__dict__``).

    Typical fixes include passing the object itself instead of the result of
    ``obj.dispose()``, or wrapping the cleanup in a zero-argument callable.
    """


class DisposalAsyncInSyncContextError(DisposalError):
    """Signal synchronous disposal of a target whose completion is deferred.

    Raised by ``dispose`` and ``dispose_all`` when the target returns an
    awaitable. Coroutines are closed before the error is raised so they do not
    leak as "never awaited".

    Typical fix is switching to ``await adispose(...)``.
    """


class DisposalChainError(DisposalError):
    """Signal that one or more steps of a disposal chain failed.

    Raised by ``dispose_all``/``adispose_all`` only after every step has run.
    ``errors`` keeps the failures in execution order, and the exception is
    chained from the first failure.
    """

    def __init__(self, errors: Sequence[Exception]) -> None:
        self.errors = tuple(errors)
        noun = "step" if len(self.errors) == 1 else "steps"
        details = "; ".join(f"{type(error).__name__}: {error}" for error in self.errors)
        super().__init__(f"{len(self.errors)} disposal {noun} failed: {details}")


class DisposalContractViolationError(DisposalError, AssertionError):
    """Signal that an implementation does not honor the disposal contract.

    Raised by ``DisposalContractChecker`` checks. It also subclasses
    ``AssertionError`` so test runners report it as a failed assertion rather
    than an error.
    """

    def __init__(self, target: object, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"{target!r} violates the disposal contract: {reason}")
