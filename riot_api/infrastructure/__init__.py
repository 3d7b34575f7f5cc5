"""Infrastructure layer - HTTP client and resources."""
from .api import RiotAPIClient

__all__ = [
    'RiotAPIClient',
]
