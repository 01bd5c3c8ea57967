# Shine/Tests/test_flashlight_channel.py
"""Command dispatch tests for the "flashlight" channel."""

import pytest

from Shine.Control import TorchController
from Shine.Drivers.mock_torch import MockTorch
from Shine.Service import CHANNEL_NAME, FlashlightChannel, MethodCall, MethodResult


def make_channel(policy="lenient", **driver_kwargs):
    driver = MockTorch(**driver_kwargs)
    controller = TorchController(driver, policy=policy)
    controller.initialize()
    return driver, FlashlightChannel(controller)


def test_channel_name(channel):
    assert channel.name == CHANNEL_NAME == "flashlight"


@pytest.mark.parametrize("turn_on", [True, False])
def test_toggle_acknowledges_with_empty_success(driver, channel, turn_on):
    result = channel.handle(MethodCall("toggleFlashlight", turn_on))

    assert result == MethodResult.success()
    assert result.ok
    assert result.result is None
    assert driver.calls == [("0", turn_on)]


def test_camera_present_but_platform_unsupported():
    driver, channel = make_channel(camera_ids=["back", "front"], supported=False)
    assert channel.controller.camera_id == "back"

    result = channel.handle(MethodCall("toggleFlashlight", True))

    assert result.ok
    assert driver.calls == []


def test_no_camera():
    driver, channel = make_channel(camera_ids=[])
    assert channel.controller.camera_id is None

    result = channel.handle(MethodCall("toggleFlashlight", False))

    assert result.ok
    assert driver.calls == []


def test_driver_failure_still_acknowledged():
    driver, channel = make_channel(fail_torch=True)

    result = channel.handle(MethodCall("toggleFlashlight", True))

    assert result.ok
    assert driver.calls == [("0", True)]


@pytest.mark.parametrize("method", ["blink", "toggleflashlight", "", "setTorch"])
def test_unknown_method_is_not_implemented(driver, channel, method):
    result = channel.handle(MethodCall(method, True))

    assert result == MethodResult.not_implemented()
    assert not result.ok
    assert driver.calls == []


@pytest.mark.parametrize("argument", [None, 1, 0, "true", [True]])
def test_non_boolean_argument_is_rejected(driver, channel, argument):
    result = channel.handle(MethodCall("toggleFlashlight", argument))

    assert result.status == MethodResult.ERROR
    assert result.code == "INVALID_ARGUMENT"
    assert driver.calls == []


class TestStrictChannel:

    def test_success(self):
        driver, channel = make_channel(policy="strict")
        assert channel.handle(MethodCall("toggleFlashlight", True)).ok
        assert driver.calls == [("0", True)]

    @pytest.mark.parametrize(
        "driver_kwargs",
        [
            {"supported": False},
            {"camera_ids": []},
            {"fail_enumeration": True},
            {"fail_torch": True},
        ],
    )
    def test_unavailable_torch_is_reported(self, driver_kwargs):
        _, channel = make_channel(policy="strict", **driver_kwargs)

        result = channel.handle(MethodCall("toggleFlashlight", True))

        assert result.status == MethodResult.ERROR
        assert result.code == "TORCH_UNAVAILABLE"
        assert result.message

    def test_unknown_method_is_still_not_implemented(self):
        _, channel = make_channel(policy="strict", supported=False)
        assert channel.handle(MethodCall("blink")) == MethodResult.not_implemented()
