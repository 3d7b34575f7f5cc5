"""Endpoint groups exposed as client attributes."""
from .base import Resource
from .summoner import SummonerResource
from .stats import StatsResource
from .champion import ChampionResource
from .game import GameResource
from .league import LeagueResource
from .team import TeamResource

__all__ = [
    'Resource',
    'SummonerResource',
    'StatsResource',
    'ChampionResource',
    'GameResource',
    'LeagueResource',
    'TeamResource',
]
