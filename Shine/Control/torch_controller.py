# Shine/Control/torch_controller.py
"""
TorchController - bridges a single boolean command to the driver's torch primitive.

The controller owns the driver and the selected camera identifier. It is
created explicitly (see Shine.Config.TorchFactory) and handed to the command
channel; nothing here is process-global.
"""

from __future__ import annotations

import logging

from Shine.Interface import (
    ErrorPolicy,
    TorchAccessError,
    TorchDriverInterface,
    TorchState,
    TorchUnavailableError,
)

logger = logging.getLogger(__name__)


class TorchController:
    """
    Typical lifecycle:
        controller = TorchController(driver)
        controller.initialize()
        controller.set_torch(True)
        controller.set_torch(False)
    """

    def __init__(
        self,
        driver: TorchDriverInterface,
        policy: ErrorPolicy = ErrorPolicy.LENIENT,
    ) -> None:
        self._driver = driver
        self._policy = ErrorPolicy(policy)
        self._camera_id: str | None = None
        self._state = TorchState.OFF

    # ------------------ Read-only properties ------------------
    @property
    def driver(self) -> TorchDriverInterface:
        return self._driver

    @property
    def policy(self) -> ErrorPolicy:
        return self._policy

    @property
    def camera_id(self) -> str | None:
        """First camera reported at initialization, None if there is none."""
        return self._camera_id

    @property
    def state(self) -> TorchState:
        """Last torch state successfully applied to the hardware."""
        return self._state

    # ------------------ Lifecycle ------------------
    def initialize(self) -> None:
        """
        Resolve the camera to drive.

        Enumeration failures are logged and leave `camera_id` unset;
        this method never raises TorchAccessError.
        """
        try:
            ids = self._driver.camera_ids()
        except TorchAccessError:
            logger.exception("Camera enumeration failed on %s", self._driver.name)
            self._camera_id = None
            return

        self._camera_id = ids[0] if ids else None
        if self._camera_id is None:
            logger.info("No camera reported by %s", self._driver.name)
        else:
            logger.info("Using camera %s on %s", self._camera_id, self._driver.name)

    # ------------------ Torch control ------------------
    def set_torch(self, turn_on: bool) -> None:
        """
        Switch the torch of the selected camera on or off.

        Lenient policy: unsupported platform, missing camera and driver
        failures are no-ops for the caller.

        Raises:
            TorchUnavailableError: strict policy only, when the request was not applied.
        """
        if not self._driver.supports_torch():
            self._unavailable(f"{self._driver.name} does not support torch control")
            return

        if self._camera_id is None:
            self._unavailable("No camera available")
            return

        try:
            self._driver.set_torch_mode(self._camera_id, turn_on)
        except TorchAccessError as e:
            logger.exception("Failed to set torch on camera %s", self._camera_id)
            if self._policy is ErrorPolicy.STRICT:
                raise TorchUnavailableError(str(e)) from e
            return

        self._state = TorchState.from_bool(turn_on)
        logger.debug("Torch %s on camera %s", self._state.value, self._camera_id)

    def _unavailable(self, reason: str) -> None:
        if self._policy is ErrorPolicy.STRICT:
            raise TorchUnavailableError(reason)
        logger.debug("Ignoring torch request: %s", reason)
