# Shine/App/main.py
"""
Command-line host for the flashlight channel.

    shine on                 # toggleFlashlight(true)
    shine off                # toggleFlashlight(false)
    shine status             # driver, capability, camera and torch state
    shine serve              # one JSON request per stdin line, one JSON response per stdout line

Logs go to stderr so stdout carries only responses.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from Shine.Config import TorchFactory
from Shine.Interface import ErrorPolicy
from Shine.Service import (
    TOGGLE_FLASHLIGHT,
    FlashlightChannel,
    MethodCall,
    dispatch_message,
    encode_result,
)

# Not __name__: that is "__main__" when run with python -m.
logger = logging.getLogger("Shine.App")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shine", description="Camera torch bridge")
    parser.add_argument(
        "--driver",
        default=None,
        help="Driver class as 'module.Class' (default: Shine.Config.torch_factory.ACTIVE_TORCH_DRIVER)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report hardware failures to the caller instead of ignoring them",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
    )
    parser.add_argument("command", choices=["on", "off", "status", "serve"])
    return parser


def serve(channel: FlashlightChannel, stdin=None, stdout=None) -> None:
    """Answer requests line by line until EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logger.info("Serving channel '%s' on stdio", channel.name)
    for line in stdin:
        if not line.strip():
            continue
        stdout.write(dispatch_message(channel, line) + "\n")
        stdout.flush()


def status(channel: FlashlightChannel) -> dict:
    controller = channel.controller
    return {
        "channel": channel.name,
        "driver": controller.driver.name,
        "supports_torch": controller.driver.supports_torch(),
        "camera_id": controller.camera_id,
        "state": controller.state.value,
        "policy": controller.policy.value,
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    policy = ErrorPolicy.STRICT if args.strict else None
    with TorchFactory.create(args.driver) as driver:
        channel = FlashlightChannel(TorchFactory.create_controller(driver, policy=policy))

        if args.command == "serve":
            serve(channel)
            return 0

        if args.command == "status":
            print(json.dumps(status(channel)))
            return 0

        result = channel.handle(MethodCall(TOGGLE_FLASHLIGHT, args.command == "on"))
        print(encode_result(result))
        return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
