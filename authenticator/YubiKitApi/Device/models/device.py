# models/device.py

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .capability import FormFactor
from .config import DeviceConfig
from .transport import Transport
from .version import Version

class DeviceInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    config: DeviceConfig
    version: Version
    serial_number: Optional[int] = Field(None, alias="serialNumber")
    form_factor: FormFactor = Field(FormFactor.UNKNOWN, alias="formFactor")
    is_locked: bool = Field(False, alias="isLocked")
    supported_capabilities: Dict[Transport, int] = Field(
        default_factory=dict, alias="supportedCapabilities"
    )

    @field_validator("form_factor", mode="before")
    @classmethod
    def _read_form_factor(cls, value: Any) -> Any:
        # upper bits of the form factor byte carry the FIPS and Sky flags
        if isinstance(value, int) and not isinstance(value, FormFactor):
            code = value & 0x0F
            try:
                return FormFactor(code)
            except ValueError:
                return FormFactor.UNKNOWN
        return value

    def get_supported_capabilities(self, transport: Transport) -> int:
        return self.supported_capabilities.get(transport, 0)
