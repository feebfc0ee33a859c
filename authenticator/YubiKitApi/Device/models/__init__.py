# YubiKitApi/Device/models/__init__.py

from .capability import Capability, DeviceFlag, FormFactor
from .config import DeviceConfig
from .device import DeviceInfo
from .transport import Transport
from .version import Version

__all__ = [
    "Capability",
    "DeviceConfig",
    "DeviceFlag",
    "DeviceInfo",
    "FormFactor",
    "Transport",
    "Version",
]
