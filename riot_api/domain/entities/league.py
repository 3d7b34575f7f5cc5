"""League standings records."""
from typing import Optional

from .base import RiotModel


class MiniSeries(RiotModel):
    target: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    progress: Optional[str] = None  # e.g. "WLN"


class LeagueEntry(RiotModel):
    """One participant (player or team) within a league."""

    player_or_team_id: Optional[str] = None
    player_or_team_name: Optional[str] = None
    league_name: Optional[str] = None
    queue_type: Optional[str] = None
    tier: Optional[str] = None
    rank: Optional[str] = None
    league_points: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None

    is_hot_streak: Optional[bool] = None
    is_veteran: Optional[bool] = None
    is_fresh_blood: Optional[bool] = None
    is_inactive: Optional[bool] = None

    mini_series: Optional[MiniSeries] = None


class League(RiotModel):
    name: Optional[str] = None
    tier: Optional[str] = None
    queue: Optional[str] = None
    timestamp: Optional[int] = None
    entries: list[LeagueEntry] = []
