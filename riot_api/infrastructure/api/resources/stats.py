from typing import List, Optional, Union

from riot_api.domain.entities import ChampionStat, PlayerStatSummary
from riot_api.domain.enums import Season
from .base import Resource

SeasonArg = Union[Season, str, None]


class StatsResource(Resource):
    """Ranked and summary statistics, optionally scoped to a season."""

    resource_name = "stats"

    def ranked(self, summoner_id: Union[int, str], season: SeasonArg = None) -> List[ChampionStat]:
        """Per-champion ranked statistics; only available for summoners who played ranked."""
        return self._get(
            f"{self._base_path(summoner_id)}/ranked",
            shape=List[ChampionStat],
            envelope="champions",
            params=self._season_params(season),
        )

    def summary(self, summoner_id: Union[int, str], season: SeasonArg = None) -> List[PlayerStatSummary]:
        """One summary per queue type the summoner has played."""
        return self._get(
            f"{self._base_path(summoner_id)}/summary",
            shape=List[PlayerStatSummary],
            envelope="playerStatSummaries",
            params=self._season_params(season),
        )

    @staticmethod
    def _season_params(season: SeasonArg) -> Optional[dict]:
        value = Season.to_param(season)
        return {"season": value} if value else None

    def _base_path(self, summoner_id: Union[int, str]) -> str:
        return f"stats/by-summoner/{self.segment(summoner_id)}"
