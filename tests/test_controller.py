import json
import logging

import pytest
from pydantic import ValidationError

from authenticator.YubiKitApi.Device import Controller, Placeholders


RAW_DEVICE_INFO = {
    "config": {
        "deviceFlags": 0,
        "challengeResponseTimeout": 15,
        "autoEjectTimeout": 0,
        "enabledCapabilities": {"usb": 0x23B},
    },
    "version": {"major": 5, "minor": 4, "micro": 3},
    "serialNumber": 9876543,
    "formFactor": 1,
    "isLocked": False,
    "supportedCapabilities": {"usb": 0x23B, "nfc": 0x23B},
}


def test_parse_and_convert():
    controller = Controller()
    info = controller.parse_device_info(RAW_DEVICE_INFO)
    result = controller.to_json(info, True)
    assert result["serial"] == 9876543
    assert result["config"]["enabled_capabilities"] == {"usb": 0x23B, "nfc": 0}
    assert result["isNFC"] is True
    assert result["name"] == "FIXME"


def test_to_json_string_uses_controller_settings():
    controller = Controller(placeholders=Placeholders(name="YubiKey 5 NFC"), indent=2)
    info = controller.parse_device_info(RAW_DEVICE_INFO)
    text = controller.to_json_string(info, False)
    assert "\n  " in text
    assert json.loads(text)["name"] == "YubiKey 5 NFC"


def test_parse_device_info_logs_and_reraises(caplog):
    controller = Controller()
    with caplog.at_level(logging.ERROR):
        with pytest.raises(ValidationError):
            controller.parse_device_info({"config": {}})
    assert "Failed to parse device info" in caplog.text
