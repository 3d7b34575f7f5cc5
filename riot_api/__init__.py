"""
riot-api
========

Python client for the League of Legends REST API (summoners, champions,
recent games, ranked statistics, leagues and teams).

Layout:
- domain: typed response records, regions, seasons and errors
- infrastructure: the httpx-backed client and its resources
- presentation: the ``riot-api`` command line
"""

__version__ = "0.3.0"

from .domain import (
    Summoner, MasteryPage, RunePage, ChampionStat, PlayerStatSummary,
    Champion, Game, League, Team,
    Region, Season,
    ConfigurationError, RiotAPIError, ConnectionFailed, StatusError,
    ClientError, ResourceNotFound, ServerError, ResponseValidationError,
)

from .infrastructure import RiotAPIClient

from .config import settings

__all__ = [
    # Version info
    '__version__',

    # Client
    'RiotAPIClient',

    # Domain
    'Summoner',
    'MasteryPage',
    'RunePage',
    'ChampionStat',
    'PlayerStatSummary',
    'Champion',
    'Game',
    'League',
    'Team',
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

    # Config
    'settings',
]
