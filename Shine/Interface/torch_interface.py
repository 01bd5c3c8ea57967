# Shine/Interface/torch_interface.py
from __future__ import annotations

import abc
import enum


# ==============================
# Data Structures
# ==============================

class TorchState(enum.Enum):
    """Binary torch state as last applied to the hardware."""
    OFF = "off"
    ON = "on"

    @classmethod
    def from_bool(cls, turn_on: bool) -> TorchState:
        return cls.ON if turn_on else cls.OFF


class ErrorPolicy(str, enum.Enum):
    """
    How hardware failures are reported to the caller.

    LENIENT: failures are logged and swallowed, the caller always sees success.
    STRICT:  failures surface as TorchUnavailableError.
    """
    LENIENT = "lenient"
    STRICT = "strict"


# ==============================
# Custom Exceptions
# ==============================

class TorchAccessError(Exception):
    """Hardware access failure (enumeration, missing torch, device busy or gone)."""


class TorchUnavailableError(TorchAccessError):
    """Raised in strict mode when a torch request could not be applied."""


# ==============================
# Abstract Torch Driver Interface
# ==============================

class TorchDriverInterface(abc.ABC):
    """
    Abstract base class for the hardware side of the torch bridge.

    Typical lifecycle:
        driver.supports_torch()
        ids = driver.camera_ids()
        driver.set_torch_mode(ids[0], True)
        driver.close()

    Implementation notes:
      - `camera_ids()` and `set_torch_mode()` MUST raise TorchAccessError
        (never OSError, CalledProcessError, ...) on hardware failure.
      - `supports_torch()` is a pure capability query and must not raise.
      - Identifiers are opaque strings, stable for the process lifetime.
    """

    _name: str = "GenericTorch"

    # ------------------ Read-only properties ------------------
    @property
    def name(self) -> str:
        """Human-readable driver name (e.g., 'MockTorch', 'V4L2Torch', 'SysfsTorch[/sys/class/leds]')."""
        return self._name

    # ------------------ Capabilities ------------------
    @abc.abstractmethod
    def supports_torch(self) -> bool:
        """True if this platform can drive a torch at all."""
        raise NotImplementedError

    # ------------------ Enumeration ------------------
    @abc.abstractmethod
    def camera_ids(self) -> list[str]:
        """
        List the camera device identifiers known to the hardware layer.

        Raises:
            TorchAccessError: If the device list cannot be read.
        """
        raise NotImplementedError

    # ------------------ Torch control ------------------
    @abc.abstractmethod
    def set_torch_mode(self, camera_id: str, enabled: bool) -> None:
        """
        Switch the torch of `camera_id` on or off.

        Raises:
            TorchAccessError: If the camera is unknown, busy, disconnected
                or has no torch.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release driver resources. Drivers holding nothing may keep the default."""

    # ------------------ Context manager support ------------------
    def __enter__(self) -> TorchDriverInterface:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
