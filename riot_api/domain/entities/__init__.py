"""Domain entities."""
from .base import RiotModel
from .summoner import Summoner, MasteryPage, Talent, RunePage, RuneSlot, Rune
from .stats import Statistic, ChampionStat, PlayerStatSummary
from .champion import Champion
from .game import Game, Player
from .league import League, LeagueEntry, MiniSeries
from .team import (
    Team, TeamId, Roster, TeamMember,
    TeamStatSummary, TeamStatDetail, MatchHistorySummary,
)

__all__ = [
    'RiotModel',
    'Summoner',
    'MasteryPage',
    'Talent',
    'RunePage',
    'RuneSlot',
    'Rune',
    'Statistic',
    'ChampionStat',
    'PlayerStatSummary',
    'Champion',
    'Game',
    'Player',
    'League',
    'LeagueEntry',
    'MiniSeries',
    'Team',
    'TeamId',
    'Roster',
    'TeamMember',
    'TeamStatSummary',
    'TeamStatDetail',
    'MatchHistorySummary',
]
