from typing import Any, Optional, Union

from riot_api.domain.entities import League
from .base import Resource


class LeagueResource(Resource):
    resource_name = "league"
    version = "v2.1"

    def by_summoner(self, summoner_id: Union[int, str]) -> Optional[League]:
        """The league the summoner plays in.

        The endpoint answers with a map keyed by summoner id; the entry for
        the requested id is returned, falling back to the first league in the
        map when the key is absent.
        """
        key = str(summoner_id).strip()
        return self._get(
            f"league/by-summoner/{self.segment(summoner_id)}",
            shape=League,
            envelope=lambda body: self._pick(body, key),
        )

    @staticmethod
    def _pick(body: Any, key: str) -> Any:
        if not isinstance(body, dict):
            return body
        if key in body:
            return body[key]
        # A bare league object rather than a map.
        if "entries" in body or "tier" in body:
            return body
        return next(iter(body.values()), None)
