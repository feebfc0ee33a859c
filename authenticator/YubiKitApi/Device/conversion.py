# YubiKitApi/Device/conversion.py

import json
from typing import Any, Dict, List, Optional
from .models import DeviceConfig, DeviceInfo, Transport, Version
from .settings import Placeholders

def config_to_json(config: DeviceConfig) -> Dict[str, Any]:
    """
    Maps a DeviceConfig to the JSON object expected by the UI.

    Args:
        config (DeviceConfig): Device configuration.

    Returns:
        Dict[str, Any]: Object with device_flags, challenge_response_timeout,
        auto_eject_timeout and enabled_capabilities. A transport without
        enabled capabilities is reported as 0.
    """
    usb: Optional[int] = config.get_enabled_capabilities(Transport.USB)
    nfc: Optional[int] = config.get_enabled_capabilities(Transport.NFC)
    return {
        "device_flags": config.device_flags,
        "challenge_response_timeout": config.challenge_response_timeout,
        "auto_eject_timeout": config.auto_eject_timeout,
        "enabled_capabilities": {
            "usb": usb if usb is not None else 0,
            "nfc": nfc if nfc is not None else 0,
        },
    }

def version_to_json(version: Version) -> List[int]:
    return [version.major, version.minor, version.micro]

def device_info_to_json(
    info: DeviceInfo,
    is_nfc_device: bool,
    placeholders: Optional[Placeholders] = None,
) -> Dict[str, Any]:
    """
    Maps a DeviceInfo to the JSON object expected by the UI.

    Args:
        info (DeviceInfo): Device information read from the key.
        is_nfc_device (bool): Whether the key is connected over NFC. Reported
            as-is under "isNFC".
        placeholders (Placeholders, optional): Values for is_sky, is_fips and
            name. Defaults to Placeholders().

    Returns:
        Dict[str, Any]: JSON-compatible object with ordered keys.
    """
    if placeholders is None:
        placeholders = Placeholders()
    return {
        "config": config_to_json(info.config),
        "serial": info.serial_number,
        "version": version_to_json(info.version),
        "form_factor": int(info.form_factor),
        "is_locked": info.is_locked,
        "is_sky": placeholders.is_sky,
        "is_fips": placeholders.is_fips,
        "name": placeholders.name,
        "isNFC": is_nfc_device,
        "supported_capabilities": {
            "usb": info.get_supported_capabilities(Transport.USB),
            "nfc": info.get_supported_capabilities(Transport.NFC),
        },
    }

def dumps(value: Any, indent: Optional[int] = None) -> str:
    return json.dumps(value, indent=indent)
