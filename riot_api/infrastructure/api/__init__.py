"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .response import shape_response, decode_body

__all__ = [
    'RiotAPIClient',
    'shape_response',
    'decode_body',
]
