"""Competitive season enumeration for statistics endpoints."""
from enum import Enum
from typing import Optional, Union


class Season(Enum):
    """Ranked seasons accepted by the ``season`` query parameter."""

    SEASON3 = "SEASON3"
    SEASON4 = "SEASON4"

    @property
    def param(self) -> str:
        """Get the query parameter value."""
        return self.value

    @classmethod
    def to_param(cls, season: Union['Season', str, None]) -> Optional[str]:
        """Normalize a season argument; ``None`` means the current season."""
        if season is None:
            return None
        if isinstance(season, cls):
            return season.param
        return str(season).strip().upper()
