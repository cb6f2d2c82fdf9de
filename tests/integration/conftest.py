"""Default marks for tests under `tests/integration/`."""

from pathlib import Path

import pytest

INTEGRATION_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark every item collected under `tests/integration/` as `integration`."""
    for item in items:
        if INTEGRATION_ROOT in item.path.resolve().parents and not item.get_closest_marker(
            "integration"
        ):
            item.add_marker(pytest.mark.integration)
