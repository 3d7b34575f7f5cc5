from typing import List

from riot_api.domain.entities import Champion
from .base import Resource


class ChampionResource(Resource):
    resource_name = "champions"

    def list(self) -> List[Champion]:
        """Every champion in the game."""
        return self._get("champion", shape=List[Champion], envelope="champions")

    def free(self) -> List[Champion]:
        """The current free-to-play rotation."""
        return self._get(
            "champion",
            shape=List[Champion],
            envelope="champions",
            params={"freeToPlay": "true"},
        )
