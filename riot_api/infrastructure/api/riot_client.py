"""Riot Games API client."""
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx

from riot_api.config import Settings
from riot_api.core.logging import get_logger
from riot_api.domain.enums import Region
from riot_api.domain.exceptions import ConfigurationError, ConnectionFailed
from .resources import (
    ChampionResource,
    GameResource,
    LeagueResource,
    StatsResource,
    SummonerResource,
    TeamResource,
)
from .response import Envelope, shape_response

logger = get_logger(__name__, service="riot-api")

REDACTED_KEY = "[API-KEY]"


class RiotAPIClient:
    """Synchronous Riot API client bound to one region.

    Resources hang off the client as attributes::

        with RiotAPIClient(api_key, "euw") as api:
            api.summoner.name("BestLuxEUW")
            api.stats.ranked(19531813, season="SEASON3")
    """

    DEFAULT_HOST = "https://prod.api.pvp.net"

    def __init__(
        self,
        api_key: Optional[str] = None,
        region: Union[Region, str, None] = None,
        *,
        debug: bool = False,
        raise_status_errors: bool = False,
        timeout: float = 30.0,
        verify: bool = True,
        host: str = DEFAULT_HOST,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise ConfigurationError("api_key missing")

        self.api_key = api_key
        self.region = Region.from_code(region)
        self.debug = debug
        self.raise_status_errors = raise_status_errors
        self.verify = verify
        self.base_url = f"{host.rstrip('/')}/api/lol/{self.region.code}/"

        self.session = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            verify=verify,
            transport=transport,
            headers={"Accept": "application/json", "User-Agent": "riot-api-python"},
            event_hooks={"request": [self._on_request], "response": [self._on_response]},
        )

        self.summoner  = SummonerResource(self)
        self.stats     = StatsResource(self)
        self.champions = ChampionResource(self)
        self.game      = GameResource(self)
        self.league    = LeagueResource(self)
        self.team      = TeamResource(self)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "RiotAPIClient":
        """Build a client from environment-backed settings; keyword overrides win."""
        options: Dict[str, Any] = {
            "api_key": settings.RIOT_API_KEY,
            "region": settings.RIOT_REGION,
            "debug": settings.DEBUG,
            "raise_status_errors": settings.RAISE_STATUS_ERRORS,
            "timeout": settings.REQUEST_TIMEOUT,
            "verify": settings.SSL_VERIFY,
            "host": settings.RIOT_API_HOST,
        }
        options.update(overrides)
        return cls(**options)

    def __enter__(self) -> "RiotAPIClient":
        return self

    def __exit__(self, *_) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def __repr__(self) -> str:
        return f"<RiotAPIClient region={self.region.code!r} debug={self.debug} raise_status_errors={self.raise_status_errors}>"

    @property
    def ssl_options(self) -> Dict[str, bool]:
        return {"verify": self.verify}

    # ── Requests ───────────────────────────────────────────────────────

    @staticmethod
    def redact_url(url: httpx.URL) -> str:
        """Render a request URL with the api_key value masked."""
        base = str(url).split("?", 1)[0]
        pairs = [
            f"{quote(key, safe='')}={REDACTED_KEY if key == 'api_key' else quote(value, safe='')}"
            for key, value in url.params.multi_items()
        ]
        return f"{base}?{'&'.join(pairs)}" if pairs else base

    def _on_request(self, request: httpx.Request) -> None:
        line = f"Started {request.method} request to: {self.redact_url(request.url)}"
        if self.debug:
            print(line, flush=True)
        logger.debug(line, extra={"method": request.method})

    def _on_response(self, response: httpx.Response) -> None:
        logger.debug(
            lambda: f"HTTP {response.status_code}",
            extra={"status": response.status_code, "url": self.redact_url(response.request.url)},
        )

    def get(
        self,
        path: str,
        *,
        version: str,
        params: Optional[Dict[str, Any]] = None,
        shape: Any = None,
        envelope: Envelope = None,
    ) -> Any:
        """GET ``{base_url}{version}/{path}`` and shape the response.

        Resource parameters come first in the query string and ``api_key``
        is always appended last.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        query["api_key"] = self.api_key

        request = self.session.build_request("GET", f"{version}/{path}", params=query)
        url = self.redact_url(request.url)
        try:
            response = self.session.send(request)
        except httpx.TransportError as exc:
            logger.error(lambda: f"Network error: {exc}", extra={"url": url})
            raise ConnectionFailed(f"request to {url} failed: {exc}", url=url) from exc

        return shape_response(
            response,
            shape,
            envelope=envelope,
            raise_status_errors=self.raise_status_errors,
            url=url,
        )
