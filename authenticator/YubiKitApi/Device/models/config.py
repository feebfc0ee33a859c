# models/config.py

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from .transport import Transport

class DeviceConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    device_flags: int = Field(alias="deviceFlags")
    challenge_response_timeout: int = Field(alias="challengeResponseTimeout")
    auto_eject_timeout: int = Field(alias="autoEjectTimeout")
    enabled_capabilities: Dict[Transport, int] = Field(
        default_factory=dict, alias="enabledCapabilities"
    )

    def get_enabled_capabilities(self, transport: Transport) -> Optional[int]:
        """Enabled capability bitmask over ``transport``, None if nothing is enabled there."""
        return self.enabled_capabilities.get(transport)
