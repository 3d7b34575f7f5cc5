"""Ranked and summary statistics records."""
from typing import Optional

from pydantic import Field

from .base import RiotModel


class Statistic(RiotModel):
    """A single named counter; ``count`` is the upstream ``c`` field."""

    id: Optional[int] = None
    name: Optional[str] = None
    value: Optional[int] = None
    count: Optional[int] = Field(default=None, alias="c")


class ChampionStat(RiotModel):
    """Ranked statistics for one champion (id 0 is the all-champion total)."""

    id: Optional[int] = None
    name: Optional[str] = None
    stats: list[Statistic] = []


class PlayerStatSummary(RiotModel):
    """Aggregated statistics for one queue type."""

    player_stat_summary_type: Optional[str] = None
    wins: Optional[int] = None
    losses: Optional[int] = None
    modify_date: Optional[int] = None
    aggregated_stats: list[Statistic] = []
