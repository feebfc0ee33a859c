# YubiKitApi/Device/settings.py

from pydantic import BaseModel

# TODO: derive from the device once Sky and FIPS series detection is available
DEFAULT_IS_SKY = False
# TODO: derive from the device once Sky and FIPS series detection is available
DEFAULT_IS_FIPS = False
# TODO: replace with the product name resolved from form factor and version
DEFAULT_NAME = "FIXME"

class Placeholders(BaseModel):
    is_sky: bool = DEFAULT_IS_SKY
    is_fips: bool = DEFAULT_IS_FIPS
    name: str = DEFAULT_NAME
