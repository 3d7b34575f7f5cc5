"""Summoner, mastery page and rune page records."""
from typing import Optional

from .base import RiotModel


class Summoner(RiotModel):
    """A player account."""

    id: Optional[int] = None
    name: Optional[str] = None
    profile_icon_id: Optional[int] = None
    revision_date: Optional[int] = None  # Unix timestamp milliseconds
    revision_date_str: Optional[str] = None
    summoner_level: Optional[int] = None


class Talent(RiotModel):
    id: Optional[int] = None
    name: Optional[str] = None
    rank: Optional[int] = None


class MasteryPage(RiotModel):
    id: Optional[int] = None
    name: Optional[str] = None
    current: Optional[bool] = None
    talents: list[Talent] = []


class Rune(RiotModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    tier: Optional[int] = None


class RuneSlot(RiotModel):
    rune_slot_id: Optional[int] = None
    rune: Optional[Rune] = None


class RunePage(RiotModel):
    id: Optional[int] = None
    name: Optional[str] = None
    current: Optional[bool] = None
    slots: list[RuneSlot] = []
