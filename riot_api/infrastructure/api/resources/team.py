from typing import List, Union

from riot_api.domain.entities import Team
from .base import Resource


class TeamResource(Resource):
    resource_name = "team"
    version = "v2.1"

    def by_summoner(self, summoner_id: Union[int, str]) -> List[Team]:
        """Ranked teams the summoner is a member of, with roster and match history."""
        return self._get(f"team/by-summoner/{self.segment(summoner_id)}", shape=List[Team])
