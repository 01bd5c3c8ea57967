# Shine/Service/message_codec.py
"""
JSON envelope used to carry MethodCall / MethodResult across a process boundary.

Request:   {"method": "toggleFlashlight", "arguments": true}
Responses: {"status": "success", "result": null}
           {"status": "notImplemented"}
           {"status": "error", "code": "...", "message": "...", "details": null}
"""

from __future__ import annotations

import json

from .flashlight_channel import MethodCall, MethodResult


class MessageFormatError(ValueError):
    """Raised when an inbound message is not a valid request envelope."""


def decode_call(message: str | bytes) -> MethodCall:
    try:
        payload = json.loads(message)
    except (ValueError, RecursionError) as e:
        raise MessageFormatError(f"Not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MessageFormatError("Request must be a JSON object")

    method = payload.get("method")
    if not isinstance(method, str):
        raise MessageFormatError("Request has no 'method' string")

    return MethodCall(method, payload.get("arguments"))


def encode_result(result: MethodResult) -> str:
    if result.status == MethodResult.SUCCESS:
        payload = {"status": result.status, "result": result.result}
    elif result.status == MethodResult.ERROR:
        payload = {
            "status": result.status,
            "code": result.code,
            "message": result.message,
            "details": result.details,
        }
    else:
        payload = {"status": result.status}
    return json.dumps(payload)


def dispatch_message(channel, message: str | bytes) -> str:
    """Decode one request, run it through `channel` and encode the response."""
    try:
        call = decode_call(message)
    except MessageFormatError as e:
        return encode_result(MethodResult.error("BAD_MESSAGE", str(e)))
    return encode_result(channel.handle(call))
