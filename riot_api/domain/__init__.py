"""Domain layer - Response records, enums, and errors."""
from .entities import (
    Summoner, MasteryPage, RunePage, ChampionStat, PlayerStatSummary,
    Champion, Game, League, Team,
)
from .enums import Region, Season
from .exceptions import (
    ConfigurationError, RiotAPIError, ConnectionFailed, StatusError,
    ClientError, ResourceNotFound, ServerError, ResponseValidationError,
)

__all__ = [
    # Entities
    'Summoner',
    'MasteryPage',
    'RunePage',
    'ChampionStat',
    'PlayerStatSummary',
    'Champion',
    'Game',
    'League',
    'Team',
    # Enums
    'Region',
    'Season',
    # Errors
    'ConfigurationError',
    'RiotAPIError',
    'ConnectionFailed',
    'StatusError',
    'ClientError',
    'ResourceNotFound',
    'ServerError',
    'ResponseValidationError',
]
