"""Champion record."""
from typing import Optional

from .base import RiotModel


class Champion(RiotModel):
    id: Optional[int] = None
    name: Optional[str] = None
    active: Optional[bool] = None

    # Ratings 0-10
    attack_rank: Optional[int] = None
    defense_rank: Optional[int] = None
    magic_rank: Optional[int] = None
    difficulty_rank: Optional[int] = None

    bot_enabled: Optional[bool] = None
    bot_mm_enabled: Optional[bool] = None
    free_to_play: Optional[bool] = None
    ranked_play_enabled: Optional[bool] = None
