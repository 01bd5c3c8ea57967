# Shine/Tests/test_torch_hardware.py
"""
Torch test using the TorchFactory abstraction.

This test validates the entire configuration and factory chain:
  - The correct driver is selected via TorchFactory
  - The TorchDriverInterface contract is respected
  - The torch can be switched through the channel without direct driver knowledge

It uses the backend defined in Shine/Config/torch_factory.py and only runs
with `pytest --run-hardware`. Runnable as a script as well.
"""

import time

import pytest

from Shine.Config import TorchFactory
from Shine.Interface import TorchState
from Shine.Service import FlashlightChannel, MethodCall

BLINKS = 3
ON_TIME = 0.5
OFF_TIME = 0.5


@pytest.mark.hardware
def test_blink_through_channel():
    with TorchFactory.create() as driver:
        assert driver.supports_torch(), f"{driver.name} cannot drive a torch here"

        controller = TorchFactory.create_controller(driver, policy="strict")
        assert controller.camera_id is not None, "No camera found"

        channel = FlashlightChannel(controller)
        try:
            for _ in range(BLINKS):
                assert channel.handle(MethodCall("toggleFlashlight", True)).ok
                assert controller.state is TorchState.ON
                time.sleep(ON_TIME)

                assert channel.handle(MethodCall("toggleFlashlight", False)).ok
                assert controller.state is TorchState.OFF
                time.sleep(OFF_TIME)
        finally:
            channel.handle(MethodCall("toggleFlashlight", False))


if __name__ == "__main__":
    test_blink_through_channel()
    print("Blink test finished.")
