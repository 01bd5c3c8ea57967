# Shine/Drivers/v4l2_torch.py
"""
V4L2 torch driver implementing the TorchDriverInterface.

Camera devices are discovered by probing /dev/video* indices with OpenCV,
the torch itself is driven through the V4L2 flash control
(`flash_led_mode`: 0 = off, 1 = flash, 2 = torch) using `v4l2-ctl`.

Requirements:
    pip install opencv-python
    apt install v4l-utils
"""

from __future__ import annotations

import logging
import shutil
import subprocess

import cv2

# Import the abstract interface and its error type from the Interface layer.
from Shine.Interface.torch_interface import TorchAccessError, TorchDriverInterface

logger = logging.getLogger(__name__)

FLASH_LED_MODE_OFF = 0
FLASH_LED_MODE_TORCH = 2


class V4L2Torch(TorchDriverInterface):
    """
    Concrete implementation of TorchDriverInterface for Linux V4L2 cameras.

    Identifiers are the video device indices as strings ("0" for /dev/video0).

    Typical usage:
        torch = V4L2Torch(max_devices=4)
        ids = torch.camera_ids()
        torch.set_torch_mode(ids[0], True)
    """

    def __init__(
        self,
        max_devices: int = 8,
        v4l2_ctl: str = "v4l2-ctl",
        command_timeout: float = 2.0,
        **kwargs,
    ) -> None:
        """
        Args:
            max_devices: number of /dev/videoN indices to probe
            v4l2_ctl: name or path of the v4l2-ctl executable
            command_timeout: seconds to wait for one v4l2-ctl call
            **kwargs: ignored additional hardware configuration fields
                      (for compatibility with factory)
        """
        super().__init__()
        self._max_devices = max_devices
        self._v4l2_ctl = v4l2_ctl
        self._command_timeout = command_timeout
        self._name = f"V4L2Torch[{v4l2_ctl}]"

    # ------------------ Capabilities ------------------
    def supports_torch(self) -> bool:
        """The flash control can only be driven when v4l2-ctl is installed."""
        return shutil.which(self._v4l2_ctl) is not None

    # ------------------ Enumeration ------------------
    def camera_ids(self) -> list[str]:
        """
        Probe /dev/video0 .. /dev/video{max_devices - 1}.

        Returns:
            list[str]: indices of the devices that could be opened, in order.

        Raises:
            TorchAccessError: if the OpenCV backend fails while probing.
        """
        found = []
        for index in range(self._max_devices):
            try:
                capture = cv2.VideoCapture(index, cv2.CAP_V4L2)
            except cv2.error as e:
                raise TorchAccessError(f"Failed to probe /dev/video{index}: {e}") from e
            try:
                if capture.isOpened():
                    found.append(str(index))
            finally:
                capture.release()

        logger.debug("Probed %d video devices, found %s", self._max_devices, found)
        return found

    # ------------------ Torch control ------------------
    def set_torch_mode(self, camera_id: str, enabled: bool) -> None:
        """
        Set `flash_led_mode` on the device.

        Raises:
            TorchAccessError: if the identifier is invalid, v4l2-ctl is missing,
                times out, or rejects the control (no flash LED, device busy).
        """
        if not (camera_id.isascii() and camera_id.isdigit()):
            raise TorchAccessError(f"Invalid V4L2 camera id {camera_id!r}")

        mode = FLASH_LED_MODE_TORCH if enabled else FLASH_LED_MODE_OFF
        cmd = [
            self._v4l2_ctl,
            "-d",
            self.device_path(camera_id),
            f"--set-ctrl=flash_led_mode={mode}",
        ]

        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self._command_timeout,
            )
        except subprocess.CalledProcessError as e:
            raise TorchAccessError(
                f"v4l2-ctl failed on {cmd[2]}: {(e.stderr or '').strip() or e.returncode}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise TorchAccessError(f"v4l2-ctl timed out on {cmd[2]}") from e
        except OSError as e:
            raise TorchAccessError(f"Cannot run {self._v4l2_ctl}: {e}") from e

    @staticmethod
    def device_path(camera_id: str) -> str:
        return f"/dev/video{camera_id}"
