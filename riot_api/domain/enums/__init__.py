"""Domain enumerations."""
from .region import Region
from .season import Season

__all__ = [
    'Region',
    'Season',
]
