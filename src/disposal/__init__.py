from disposal.completion import DisposalTarget, adispose, adispose_all, dispose, dispose_all
from disposal.contracts import (
    ChainedDisposable,
    Disposable,
    is_chained_disposable,
    is_disposable,
)
from disposal.exceptions import (
    DisposalAsyncInSyncContextError,
    DisposalChainError,
    DisposalContractViolationError,
    DisposalError,
    DisposalInvalidTargetError,
)
from disposal.types import DisposeResult, Disposer, is_disposer

__all__ = [
    "ChainedDisposable",
    "Disposable",
    "DisposalAsyncInSyncContextError",
    "DisposalChainError",
    "DisposalContractViolationError",
    "DisposalError",
    "DisposalInvalidTargetError",
    "DisposalTarget",
    "DisposeResult",
    "Disposer",
    "adispose",
    "adispose_all",
    "dispose",
    "dispose_all",
    "is_chained_disposable",
    "is_disposable",
    "is_disposer",
]
