# tests/conftest.py
"""Shared fixtures: a fake API server behind httpx.MockTransport."""
import json
from pathlib import Path

import httpx
import pytest

from riot_api import RiotAPIClient

API_KEY = "RGAPI-test-0000"
FIXTURES = Path(__file__).parent / "fixtures"

SUMMONER_ID = "44600324"
FROGGEN_ID = "19531813"

# Path after /api/lol/{region}/ (plus "?free" for the rotation) -> fixture name
ROUTES = {
    "v1.1/summoner/by-name/BestLuxEUW": "summoner",
    "v1.1/summoner/by-name/Best Lux EUW": "summoner",
    f"v1.1/summoner/{SUMMONER_ID}": "summoner",
    f"v1.1/summoner/{SUMMONER_ID},{FROGGEN_ID}/name": "summoner_names",
    f"v1.1/summoner/{FROGGEN_ID}/masteries": "masteries",
    f"v1.1/summoner/{FROGGEN_ID}/runes": "runes",
    f"v1.1/stats/by-summoner/{FROGGEN_ID}/ranked": "ranked",
    f"v1.1/stats/by-summoner/{FROGGEN_ID}/summary": "summary",
    "v1.1/champion": "champions",
    "v1.1/champion?free": "champions_free",
    f"v1.1/game/by-summoner/{FROGGEN_ID}/recent": "recent_games",
    f"v2.1/league/by-summoner/{FROGGEN_ID}": "league",
    f"v2.1/team/by-summoner/{FROGGEN_ID}": "teams",
}


def load_fixture(name: str):
    return json.loads((FIXTURES / f"{name}.json").read_text(encoding="utf-8"))


class FakeRiotServer:
    """Serves JSON fixtures and records every request it sees."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.overrides: dict[str, httpx.Response] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.params.get("api_key") != API_KEY:
            return httpx.Response(401, json={"status": {"message": "Unauthorized", "status_code": 401}})

        parts = request.url.path.split("/")  # ['', 'api', 'lol', region, version, ...]
        key = "/".join(parts[4:])
        if request.url.params.get("freeToPlay") == "true":
            key += "?free"

        if key in self.overrides:
            return self.overrides[key]
        fixture = ROUTES.get(key)
        if fixture is None:
            return httpx.Response(404, json=load_fixture("not_found"))
        return httpx.Response(200, json=load_fixture(fixture))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server():
    return FakeRiotServer()


@pytest.fixture
def make_client(server):
    """Factory for clients wired to the fake server; closes them afterwards."""
    clients = []

    def _make(**options):
        options.setdefault("api_key", API_KEY)
        options.setdefault("region", "euw")
        client = RiotAPIClient(transport=httpx.MockTransport(server), **options)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def api(make_client):
    return make_client()
