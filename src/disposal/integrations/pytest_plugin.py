from __future__ import annotations

import pytest

from disposal.testing import DisposalContractChecker


@pytest.fixture()
def disposal_checker() -> DisposalContractChecker:
    """Provide the checker used by disposal conformance tests.

    The default checker issues three sequential ``dispose`` calls per check.
    Override this fixture in your test suite to change ``repeat`` or to run
    the calls concurrently.

    Returns:
        A new ``DisposalContractChecker`` instance.

    Examples:
        .. code-block:: python

            pytest_plugins = ["disposal.integrations.pytest_plugin"]


            @pytest.fixture()
            def disposal_checker() -> DisposalContractChecker:
                return DisposalContractChecker(repeat=10, concurrent=True)

    """
    return DisposalContractChecker()
