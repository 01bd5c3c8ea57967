# Shine/Drivers/sysfs_torch.py
"""
Linux LED class torch driver implementing the TorchDriverInterface.

Phones and boards running mainline Linux expose the camera flash LED under
/sys/class/leds/<name>/ with `brightness` and `max_brightness` attributes.
LEDs whose name contains "flash" or "torch" are treated as camera torches.
"""

from __future__ import annotations

from pathlib import Path

from Shine.Interface.torch_interface import TorchAccessError, TorchDriverInterface

TORCH_LED_KEYWORDS = ("flash", "torch")


class SysfsTorch(TorchDriverInterface):
    """
    Concrete implementation of TorchDriverInterface on top of /sys/class/leds.

    Identifiers are LED directory names (e.g. "white:flash").
    Writing to `brightness` usually requires root or a udev rule.
    """

    def __init__(self, leds_root: str = "/sys/class/leds", **kwargs) -> None:
        """
        Args:
            leds_root: LED class directory
            **kwargs: ignored additional hardware configuration fields
                      (for compatibility with factory)
        """
        super().__init__()
        self._root = Path(leds_root)
        self._name = f"SysfsTorch[{leds_root}]"

    def supports_torch(self) -> bool:
        return self._root.is_dir()

    def camera_ids(self) -> list[str]:
        try:
            entries = sorted(p.name for p in self._root.iterdir())
        except OSError as e:
            raise TorchAccessError(f"Cannot list {self._root}: {e}") from e
        return [name for name in entries if any(k in name.lower() for k in TORCH_LED_KEYWORDS)]

    def set_torch_mode(self, camera_id: str, enabled: bool) -> None:
        # Identifiers are plain directory names.
        if camera_id in ("", ".", "..") or "/" in camera_id:
            raise TorchAccessError(f"Invalid LED name {camera_id!r}")

        led = self._root / camera_id

        try:
            value = (led / "max_brightness").read_text().strip() if enabled else "0"
            (led / "brightness").write_text(f"{value}\n")
        except OSError as e:
            raise TorchAccessError(f"Cannot drive LED {camera_id}: {e}") from e
