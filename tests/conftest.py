"""Pytest fixtures for device info conversion tests."""

import pytest

from authenticator.YubiKitApi.Device.models import (
    Capability,
    DeviceConfig,
    DeviceInfo,
    FormFactor,
    Transport,
    Version,
)


@pytest.fixture
def device_config() -> DeviceConfig:
    """Config with USB capabilities enabled and nothing enabled over NFC."""
    return DeviceConfig(
        device_flags=5,
        challenge_response_timeout=10,
        auto_eject_timeout=30,
        enabled_capabilities={Transport.USB: 3},
    )


@pytest.fixture
def device_info(device_config: DeviceConfig) -> DeviceInfo:
    return DeviceInfo(
        config=device_config,
        version=Version(major=5, minor=4, micro=3),
        serial_number=12345678,
        form_factor=FormFactor.USB_A_KEYCHAIN,
        is_locked=True,
        supported_capabilities={
            Transport.USB: int(Capability.OTP | Capability.U2F | Capability.FIDO2),
            Transport.NFC: int(Capability.OATH),
        },
    )
