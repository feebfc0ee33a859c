# models/version.py

from pydantic import BaseModel

class Version(BaseModel):
    major: int
    minor: int
    micro: int

    @classmethod
    def from_string(cls, value: str) -> "Version":
        """
        Parses a firmware version written as "major.minor.micro".

        Raises:
            ValueError: if the value does not have exactly three numeric parts.
        """
        parts = value.strip().split(".")
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            raise ValueError(f"Invalid version string: {value!r}")
        major, minor, micro = (int(p) for p in parts)
        return cls(major=major, minor=minor, micro=micro)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.micro}"
