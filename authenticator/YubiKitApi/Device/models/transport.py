# models/transport.py

from enum import Enum

class Transport(str, Enum):
    USB = "usb"
    NFC = "nfc"

    @classmethod
    def _missing_(cls, value):
        # the SDK names transports USB and NFC
        if isinstance(value, str):
            for member in cls:
                if value.lower() == member.value:
                    return member
        return None
