# YubiKitApi/Device/__init__.py

from .controller import Controller
from .conversion import config_to_json, device_info_to_json, dumps, version_to_json
from .settings import Placeholders

__all__ = [
    "Controller",
    "Placeholders",
    "config_to_json",
    "device_info_to_json",
    "dumps",
    "version_to_json",
]
