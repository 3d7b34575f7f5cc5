from typing import List, Union

from riot_api.domain.entities import Game
from .base import Resource


class GameResource(Resource):
    resource_name = "game"

    def recent(self, summoner_id: Union[int, str]) -> List[Game]:
        return self._get(self._recent_path(summoner_id), shape=List[Game], envelope="games")

    def _recent_path(self, summoner_id: Union[int, str]) -> str:
        return f"{self._base_path(summoner_id)}/recent"

    def _base_path(self, summoner_id: Union[int, str]) -> str:
        return f"game/by-summoner/{self.segment(summoner_id)}"
