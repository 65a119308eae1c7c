from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fakedata.utils.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by CLI invocations between tests."""

    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
