from __future__ import annotations

import pytest

from disposal.testing import DisposalContractChecker
from tests.resources import AsyncCountingResource, CountingResource, TrackingChainedResource

pytest_plugins = ["disposal.integrations.pytest_plugin"]


def test_public_disposal_checker_fixture_is_available(
    disposal_checker: DisposalContractChecker,
) -> None:
    assert isinstance(disposal_checker, DisposalContractChecker)
    assert disposal_checker.repeat == 3
    assert disposal_checker.concurrent is False


def test_disposal_checker_fixture_is_function_scoped(
    disposal_checker: DisposalContractChecker,
    request: pytest.FixtureRequest,
) -> None:
    assert request.getfixturevalue("disposal_checker") is disposal_checker


@pytest.mark.asyncio
async def test_checks_synchronous_disposable(
    disposal_checker: DisposalContractChecker,
    resource: CountingResource,
) -> None:
    await disposal_checker.check_disposable(
        resource,
        cleanup_count=lambda: resource.cleanup_count,
        is_disposed=lambda: resource.is_disposed,
    )


@pytest.mark.asyncio
async def test_checks_asynchronous_disposable(
    disposal_checker: DisposalContractChecker,
    async_resource: AsyncCountingResource,
) -> None:
    await disposal_checker.check_disposable(
        async_resource,
        cleanup_count=lambda: async_resource.cleanup_count,
        is_disposed=lambda: async_resource.is_disposed,
    )


@pytest.mark.asyncio
async def test_checks_chained_disposable(
    disposal_checker: DisposalContractChecker,
    chained_resource: TrackingChainedResource,
) -> None:
    await disposal_checker.check_chained_disposable(
        chained_resource,
        is_disposed=lambda: chained_resource.is_disposed,
    )
    assert chained_resource.on_dispose_calls == 1
