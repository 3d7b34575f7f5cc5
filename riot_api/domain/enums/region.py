"""Region enumeration for the API shards."""
from enum import Enum
from typing import Union

from ..exceptions import ConfigurationError


class Region(Enum):
    """Shards served by the API.

    Provides:
    - code: the path segment used in request URLs (e.g., euw)
    - from_code: validation of user-supplied codes
    """

    EUNE = "eune"  # Europe Nordic & East
    BR = "br"      # Brazil
    TR = "tr"      # Turkey
    NA = "na"      # North America
    EUW = "euw"    # Europe West

    @property
    def code(self) -> str:
        """Get the region code used in request paths."""
        return self.value

    @classmethod
    def valid_codes(cls) -> str:
        """Quoted, comma separated list of codes in declaration order."""
        return ",".join(f"'{r.value}'" for r in cls)

    @classmethod
    def from_code(cls, value: Union['Region', str, None]) -> 'Region':
        """Resolve a region code, raising ConfigurationError for anything outside the set."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(f"Invalid Region (Valid regions: {cls.valid_codes()})")
