from typing import List, Union

from riot_api.domain.entities import MasteryPage, RunePage, Summoner
from .base import Resource

SummonerId = Union[int, str]


class SummonerResource(Resource):
    resource_name = "summoner"

    def name(self, summoner_name: str) -> Summoner:
        return self._get(f"summoner/by-name/{self.segment(summoner_name)}", shape=Summoner)

    def id(self, summoner_id: SummonerId) -> Summoner:
        return self._get(self._base_path(summoner_id), shape=Summoner)

    def names(self, *summoner_ids: SummonerId) -> List[Summoner]:
        """Resolve several ids to summoners (only id and name are populated)."""
        if not summoner_ids:
            raise ValueError("names() needs at least one summoner id")
        ids = ",".join(self.segment(i) for i in summoner_ids)
        return self._get(f"summoner/{ids}/name", shape=List[Summoner], envelope="summoners")

    def masteries(self, summoner_id: SummonerId) -> List[MasteryPage]:
        return self._get(f"{self._base_path(summoner_id)}/masteries", shape=List[MasteryPage], envelope="pages")

    def runes(self, summoner_id: SummonerId) -> List[RunePage]:
        return self._get(f"{self._base_path(summoner_id)}/runes", shape=List[RunePage], envelope="pages")

    def _base_path(self, summoner_id: SummonerId) -> str:
        return f"summoner/{self.segment(summoner_id)}"
