# Shine/Tests/conftest.py
"""Shared pytest configuration and fixtures for the torch bridge."""

import pytest

from Shine.Control import TorchController
from Shine.Drivers.mock_torch import MockTorch
from Shine.Interface import ErrorPolicy
from Shine.Service import FlashlightChannel


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "hardware: mark test as requiring a real camera torch"
    )


def pytest_addoption(parser):
    parser.addoption(
        "--run-hardware",
        action="store_true",
        default=False,
        help="Run tests that switch a physical torch",
    )


def pytest_collection_modifyitems(config, items):
    """Skip hardware tests unless --run-hardware is specified."""
    if config.getoption("--run-hardware"):
        return

    skip_hardware = pytest.mark.skip(reason="Need --run-hardware option to run")
    for item in items:
        if "hardware" in item.keywords:
            item.add_marker(skip_hardware)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def driver():
    return MockTorch(camera_ids=["0", "1"])


@pytest.fixture
def controller(driver):
    controller = TorchController(driver)
    controller.initialize()
    return controller


@pytest.fixture
def strict_controller(driver):
    controller = TorchController(driver, policy=ErrorPolicy.STRICT)
    controller.initialize()
    return controller


@pytest.fixture
def channel(controller):
    return FlashlightChannel(controller)
