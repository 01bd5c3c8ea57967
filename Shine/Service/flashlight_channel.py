# Shine/Service/flashlight_channel.py
"""
Command channel between the host application shell and the torch controller.

The host sends a MethodCall (command name + single argument) and receives
exactly one MethodResult back. The only command understood is
"toggleFlashlight"; everything else is answered with "not implemented".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from Shine.Control import TorchController
from Shine.Interface import TorchUnavailableError

logger = logging.getLogger(__name__)

CHANNEL_NAME = "flashlight"
TOGGLE_FLASHLIGHT = "toggleFlashlight"


# ==============================
# Data Structures
# ==============================

@dataclass(frozen=True)
class MethodCall:
    """Inbound command: a method name and its single argument."""
    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodResult:
    """
    Outbound response to one MethodCall.

    Attributes:
        status: "success", "error" or "notImplemented".
        result: payload of a success response (always None for this channel).
        code, message, details: populated for error responses only.
    """
    status: str
    result: Any = None
    code: str | None = None
    message: str | None = None
    details: Any = None

    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "notImplemented"

    @classmethod
    def success(cls, result: Any = None) -> MethodResult:
        return cls(cls.SUCCESS, result=result)

    @classmethod
    def error(cls, code: str, message: str | None = None, details: Any = None) -> MethodResult:
        return cls(cls.ERROR, code=code, message=message, details=details)

    @classmethod
    def not_implemented(cls) -> MethodResult:
        return cls(cls.NOT_IMPLEMENTED)

    @property
    def ok(self) -> bool:
        return self.status == self.SUCCESS


# ==============================
# Channel
# ==============================

class FlashlightChannel:
    """
    Dispatches host commands to a TorchController.

    Typical usage:
        channel = FlashlightChannel(TorchFactory.create_controller())
        channel.handle(MethodCall("toggleFlashlight", True))   # MethodResult.success()
        channel.handle(MethodCall("blink"))                    # MethodResult.not_implemented()
    """

    def __init__(self, controller: TorchController, name: str = CHANNEL_NAME) -> None:
        self._controller = controller
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def controller(self) -> TorchController:
        return self._controller

    def handle(self, call: MethodCall) -> MethodResult:
        """Handle one command to completion and return its response."""
        if call.method != TOGGLE_FLASHLIGHT:
            logger.debug("[%s] Unknown method %r", self._name, call.method)
            return MethodResult.not_implemented()

        turn_on = call.arguments
        if not isinstance(turn_on, bool):
            return MethodResult.error(
                "INVALID_ARGUMENT",
                f"{TOGGLE_FLASHLIGHT} expects a boolean, got {type(turn_on).__name__}",
            )

        try:
            self._controller.set_torch(turn_on)
        except TorchUnavailableError as e:
            return MethodResult.error("TORCH_UNAVAILABLE", str(e))

        return MethodResult.success(None)
