"""Recent game records."""
from typing import Optional

from .base import RiotModel
from .stats import Statistic


class Player(RiotModel):
    """Another summoner who took part in a game."""

    summoner_id: Optional[int] = None
    team_id: Optional[int] = None  # 100 or 200
    champion_id: Optional[int] = None


class Game(RiotModel):
    """A game from a summoner's recent history."""

    game_id: Optional[int] = None
    champion_id: Optional[int] = None
    create_date: Optional[int] = None  # Unix timestamp milliseconds

    game_mode: Optional[str] = None
    game_type: Optional[str] = None
    sub_type: Optional[str] = None
    map_id: Optional[int] = None
    team_id: Optional[int] = None

    spell1: Optional[int] = None
    spell2: Optional[int] = None
    level: Optional[int] = None
    invalid: Optional[bool] = None

    fellow_players: list[Player] = []
    statistics: list[Statistic] = []
