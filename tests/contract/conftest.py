"""Default marks for tests under `tests/contract/`."""

from pathlib import Path

import pytest

CONTRACT_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark every item collected under `tests/contract/` as `contract`."""
    for item in items:
        if CONTRACT_ROOT in item.path.resolve().parents and not item.get_closest_marker(
            "contract"
        ):
            item.add_marker(pytest.mark.contract)
