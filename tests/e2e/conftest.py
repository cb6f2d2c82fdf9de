"""Default marks for tests under `tests/e2e/`."""

from pathlib import Path

import pytest

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark every item collected under `tests/e2e/` as `e2e`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents and not item.get_closest_marker("e2e"):
            item.add_marker(pytest.mark.e2e)
