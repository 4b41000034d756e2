"""Shared pytest fixtures for disposal tests."""

import pytest

from tests.resources import AsyncCountingResource, CountingResource, TrackingChainedResource


@pytest.fixture()
def resource() -> CountingResource:
    """Fresh synchronous disposable."""
    return CountingResource()


@pytest.fixture()
def async_resource() -> AsyncCountingResource:
    """Fresh asynchronous disposable."""
    return AsyncCountingResource()


@pytest.fixture()
def chained_resource() -> TrackingChainedResource:
    """Fresh chained disposable with one dependent teardown step."""
    return TrackingChainedResource()
