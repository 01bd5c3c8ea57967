# Shine/Service/__init__.py
"""
Service layer: the "flashlight" command channel exposed to the host shell.

Example:
    from Shine.Config import TorchFactory
    from Shine.Service import FlashlightChannel, MethodCall

    channel = FlashlightChannel(TorchFactory.create_controller())
    channel.handle(MethodCall("toggleFlashlight", True))
"""

from .flashlight_channel import (
    CHANNEL_NAME,
    TOGGLE_FLASHLIGHT,
    FlashlightChannel,
    MethodCall,
    MethodResult,
)
from .message_codec import MessageFormatError, decode_call, dispatch_message, encode_result

__all__ = [
    "CHANNEL_NAME",
    "TOGGLE_FLASHLIGHT",
    "FlashlightChannel",
    "MessageFormatError",
    "MethodCall",
    "MethodResult",
    "decode_call",
    "dispatch_message",
    "encode_result",
]
