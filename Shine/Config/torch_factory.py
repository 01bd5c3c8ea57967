# Shine/Config/torch_factory.py
"""
TorchFactory - central entry point for selecting and instantiating the active torch driver.

This module hides all hardware details (device paths, backend type, etc.)
from upper layers (Control, Service, App). The factory reads configuration
constants and returns a ready-to-use TorchDriverInterface object or a
fully initialized TorchController.
"""

from __future__ import annotations

import importlib
import logging

from Shine.Control import TorchController
from Shine.Interface import ErrorPolicy, TorchDriverInterface

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# GLOBAL HARDWARE CONFIGURATION
# ---------------------------------------------------------------------------

# Select which driver backend to use.
# Possible values:
#   "Shine.Drivers.v4l2_torch.V4L2Torch"
#   "Shine.Drivers.sysfs_torch.SysfsTorch"
#   "Shine.Drivers.mock_torch.MockTorch"
ACTIVE_TORCH_DRIVER = "Shine.Drivers.v4l2_torch.V4L2Torch"

# Default hardware parameters (used for driver constructor).
# Drivers ignore the keys they do not know.
TORCH_HARDWARE_CONFIG = {
    "max_devices": 8,                   # /dev/video0 .. /dev/video7
    "v4l2_ctl": "v4l2-ctl",
    "command_timeout": 2.0,
    "leds_root": "/sys/class/leds",
}

# "lenient": hardware failures are logged and swallowed
# "strict":  hardware failures are reported to the host shell
ERROR_POLICY = ErrorPolicy.LENIENT
# ---------------------------------------------------------------------------


class TorchFactory:
    """
    Factory responsible for creating a TorchDriverInterface implementation
    according to the configuration above.

    The rest of the system remains completely unaware of the underlying hardware.
    """

    @staticmethod
    def create(driver_path: str | None = None, **overrides) -> TorchDriverInterface:
        """
        Create and configure the active torch driver.

        Args:
            driver_path: dotted "module.Class" path overriding ACTIVE_TORCH_DRIVER.
            **overrides: constructor arguments merged over TORCH_HARDWARE_CONFIG.

        Returns:
            TorchDriverInterface: fully constructed driver instance.

        Raises:
            TypeError: if the configured class does not implement TorchDriverInterface.
        """
        # Parse module path and class name
        module_path, class_name = (driver_path or ACTIVE_TORCH_DRIVER).rsplit(".", 1)

        # Dynamically import driver
        module = importlib.import_module(module_path)
        driver_class = getattr(module, class_name)

        # Instantiate driver using hardware config
        driver = driver_class(**{**TORCH_HARDWARE_CONFIG, **overrides})

        # Runtime contract validation
        if not isinstance(driver, TorchDriverInterface):
            raise TypeError(f"{class_name} does not implement TorchDriverInterface")

        logger.debug("Created torch driver %s", driver.name)
        return driver

    @staticmethod
    def create_controller(
        driver: TorchDriverInterface | None = None,
        policy: ErrorPolicy | str | None = None,
    ) -> TorchController:
        """
        Build a TorchController around `driver` (or the configured driver) and initialize it.

        Returns:
            TorchController: controller with its camera identifier resolved.
        """
        controller = TorchController(
            driver if driver is not None else TorchFactory.create(),
            policy=ErrorPolicy(policy or ERROR_POLICY),
        )
        controller.initialize()
        return controller
