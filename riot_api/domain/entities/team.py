"""Ranked team records."""
from typing import Optional

from .base import RiotModel


class TeamId(RiotModel):
    full_id: Optional[str] = None


class MatchHistorySummary(RiotModel):
    """One game in a team's match history."""

    game_id: Optional[int] = None
    map_id: Optional[int] = None
    game_mode: Optional[str] = None
    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None
    opposing_team_name: Optional[str] = None
    opposing_team_kills: Optional[int] = None
    win: Optional[bool] = None
    invalid: Optional[bool] = None
    date: Optional[int] = None  # Unix timestamp milliseconds


class TeamMember(RiotModel):
    player_id: Optional[int] = None
    join_date: Optional[int] = None
    invite_date: Optional[int] = None
    status: Optional[str] = None


class Roster(RiotModel):
    owner_id: Optional[int] = None
    member_list: list[TeamMember] = []


class TeamStatDetail(RiotModel):
    team_stat_type: Optional[str] = None  # e.g. RANKED_TEAM_5x5
    team_id: Optional[TeamId] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    average_games_played: Optional[int] = None
    max_rating: Optional[int] = None


class TeamStatSummary(RiotModel):
    team_id: Optional[TeamId] = None
    team_stat_details: list[TeamStatDetail] = []


class Team(RiotModel):
    """A ranked team the summoner belongs to."""

    team_id: Optional[TeamId] = None
    name: Optional[str] = None
    tag: Optional[str] = None
    status: Optional[str] = None
    create_date: Optional[int] = None

    match_history: list[MatchHistorySummary] = []
    roster: Optional[Roster] = None
    team_stat_summary: Optional[TeamStatSummary] = None
