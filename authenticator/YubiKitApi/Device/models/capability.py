# models/capability.py

from enum import IntEnum, IntFlag

class Capability(IntFlag):
    OTP = 0x001
    U2F = 0x002
    OPENPGP = 0x008
    PIV = 0x010
    OATH = 0x020
    HSMAUTH = 0x100
    FIDO2 = 0x200

class DeviceFlag(IntFlag):
    REMOTE_WAKEUP = 0x40
    EJECT = 0x80

class FormFactor(IntEnum):
    UNKNOWN = 0x00
    USB_A_KEYCHAIN = 0x01
    USB_A_NANO = 0x02
    USB_C_KEYCHAIN = 0x03
    USB_C_NANO = 0x04
    USB_C_LIGHTNING = 0x05
    USB_A_BIO = 0x06
    USB_C_BIO = 0x07
