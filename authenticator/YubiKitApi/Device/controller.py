# YubiKitApi/Device/controller.py

from typing import Any, Dict, Optional
from .conversion import device_info_to_json, dumps
from .models import DeviceInfo
from .settings import Placeholders
import logging

logger = logging.getLogger(__name__)

class Controller:
    def __init__(self, placeholders: Optional[Placeholders] = None, indent: Optional[int] = None):
        """
        Initializes the Controller with placeholder values and output formatting.

        Args:
            placeholders (Placeholders, optional): Values for is_sky, is_fips and name. Defaults to Placeholders().
            indent (int, optional): Indentation of the JSON text. Defaults to compact output.
        """
        self.placeholders = placeholders if placeholders is not None else Placeholders()
        self.indent = indent

    def parse_device_info(self, data: Dict) -> DeviceInfo:
        """
        Parses a raw device info mapping into a DeviceInfo instance.

        Args:
            data (Dict): Device info as a dictionary, camelCase or snake_case keys.

        Returns:
            DeviceInfo: Parsed device info model.
        """
        try:
            info = DeviceInfo(**data)
        except Exception as e:
            logger.error(f"Failed to parse device info: {e}")
            raise
        logger.info(f"Parsed device info for serial {info.serial_number}, firmware {info.version}.")
        return info

    def to_json(self, info: DeviceInfo, is_nfc_device: bool) -> Dict[str, Any]:
        """
        Converts device info into the JSON object expected by the UI.

        Args:
            info (DeviceInfo): Device info read from the key.
            is_nfc_device (bool): Whether the key is connected over NFC.

        Returns:
            Dict[str, Any]: JSON-compatible object, using the controller's placeholders.
        """
        result = device_info_to_json(info, is_nfc_device, self.placeholders)
        logger.debug(f"Device info JSON: {result}")
        return result

    def to_json_string(self, info: DeviceInfo, is_nfc_device: bool) -> str:
        """
        Converts device info into JSON text for the UI.

        Args:
            info (DeviceInfo): Device info read from the key.
            is_nfc_device (bool): Whether the key is connected over NFC.

        Returns:
            str: JSON text, indented according to the controller's settings.
        """
        return dumps(self.to_json(info, is_nfc_device), indent=self.indent)
