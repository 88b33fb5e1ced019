"""
Shared fixtures for lasersight tests.

Run with: pytest tests/ -v
"""
import logging

import pytest

from lasersight.config.scanner_config import ScannerModel, ScanSpecPoint
from lasersight.utils.logging_config import LOGGER_NAME


@pytest.fixture
def two_point_scanner() -> ScannerModel:
    """Scanner rated 60K at 4° and 40K at 8°."""
    return ScannerModel(
        name="Two Point",
        specs=(ScanSpecPoint(4, 60, "Fast"), ScanSpecPoint(8, 40, "ILDA")),
    )


@pytest.fixture
def single_point_scanner() -> ScannerModel:
    return ScannerModel(name="Single", specs=(ScanSpecPoint(8, 40, "ILDA"),))


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop handlers installed by setup_logging so streams don't leak across tests."""
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
