from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    # cli.main() points loguru at the captured stderr of the running test.
    yield
    logger.remove()
    logger.disable("pycut")
