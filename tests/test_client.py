# tests/test_client.py
import httpx
import pytest

from riot_api import (
    ConfigurationError,
    ConnectionFailed,
    Region,
    ResourceNotFound,
    RiotAPIClient,
    Summoner,
)
from riot_api.config import Settings

from .conftest import API_KEY


class TestConstruction:
    """Client construction and option validation"""

    def test_returns_instance_with_essential_parameters(self):
        with RiotAPIClient(api_key=API_KEY, region="euw") as client:
            assert isinstance(client, RiotAPIClient)
            assert client.region is Region.EUW

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="api_key missing"):
            RiotAPIClient(region="euw")

    def test_empty_api_key(self):
        with pytest.raises(ConfigurationError):
            RiotAPIClient(api_key="", region="euw")

    def test_invalid_region_lists_valid_set(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RiotAPIClient(api_key=API_KEY, region="YYZ")

        assert str(exc_info.value) == "Invalid Region (Valid regions: 'eune','br','tr','na','euw')"

    def test_missing_region(self):
        with pytest.raises(ConfigurationError, match="Invalid Region"):
            RiotAPIClient(api_key=API_KEY)

    def test_configuration_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            RiotAPIClient(api_key=API_KEY, region="moon")

    def test_region_member_and_uppercase_code_accepted(self):
        with RiotAPIClient(API_KEY, Region.NA) as na, RiotAPIClient(API_KEY, "EUNE") as eune:
            assert na.base_url == "https://prod.api.pvp.net/api/lol/na/"
            assert eune.region is Region.EUNE

    def test_ssl_verification_enforced_by_default(self):
        with RiotAPIClient(API_KEY, "euw") as client:
            assert client.ssl_options == {"verify": True}

    def test_ssl_verification_can_be_disabled(self):
        with RiotAPIClient(API_KEY, "euw", verify=False) as client:
            assert client.ssl_options == {"verify": False}

    def test_custom_host(self):
        with RiotAPIClient(API_KEY, "br", host="https://example.test/") as client:
            assert client.base_url == "https://example.test/api/lol/br/"

    def test_close_closes_session(self):
        client = RiotAPIClient(API_KEY, "tr")
        client.close()
        assert client.session.is_closed


class TestFromSettings:

    def test_builds_from_environment(self, monkeypatch):
        monkeypatch.setenv("RIOT_API_KEY", API_KEY)
        monkeypatch.setenv("RIOT_REGION", "na")
        monkeypatch.setenv("RIOT_RAISE_STATUS_ERRORS", "true")
        monkeypatch.setenv("REQUEST_TIMEOUT", "5")

        with RiotAPIClient.from_settings(Settings()) as client:
            assert client.region is Region.NA
            assert client.raise_status_errors is True
            assert client.debug is False

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("RIOT_API_KEY", API_KEY)
        monkeypatch.setenv("RIOT_REGION", "na")

        with RiotAPIClient.from_settings(Settings(), region="tr", debug=True) as client:
            assert client.region is Region.TR
            assert client.debug is True

    def test_missing_key_in_environment(self, monkeypatch):
        monkeypatch.setenv("RIOT_API_KEY", "")
        with pytest.raises(ConfigurationError, match="api_key missing"):
            RiotAPIClient.from_settings(Settings())


class TestRequests:

    def test_api_key_appended_as_query_parameter(self, api, server):
        api.summoner.id(44600324)

        request = server.last
        assert request.method == "GET"
        assert request.url.scheme == "https"
        assert request.url.host == "prod.api.pvp.net"
        assert request.url.path == "/api/lol/euw/v1.1/summoner/44600324"
        assert request.url.params["api_key"] == API_KEY

    def test_api_key_comes_after_resource_parameters(self, api, server):
        api.stats.ranked("19531813", season="SEASON3")

        assert list(server.last.url.params.keys()) == ["season", "api_key"]

    def test_region_selects_base_url(self, make_client, server):
        make_client(region="eune").summoner.id(44600324)

        assert server.last.url.path.startswith("/api/lol/eune/")

    def test_get_without_shape_returns_decoded_json(self, api):
        body = api.get("summoner/44600324", version="v1.1")

        assert body["name"] == "Best Lux EUW"


class TestDebug:
    """Debug mode prints each request line with the key redacted"""

    def test_prints_request_line(self, make_client, capsys):
        client = make_client(debug=True)

        client.summoner.name("BestLuxEUW")

        printed = capsys.readouterr().out
        assert (
            "Started GET request to: https://prod.api.pvp.net/api/lol/euw/v1.1/summoner/by-name/BestLuxEUW?api_key=[API-KEY]"
            in printed
        )
        assert API_KEY not in printed

    def test_redacts_key_after_other_parameters(self, make_client, capsys):
        client = make_client(debug=True)

        client.stats.summary(19531813, season="SEASON3")

        printed = capsys.readouterr().out
        assert "summary?season=SEASON3&api_key=[API-KEY]" in printed

    def test_redacted_url_keeps_other_values_encoded(self):
        url = httpx.URL(
            "https://prod.api.pvp.net/api/lol/euw/v1.1/champion",
            params={"tag": "a&b=c d", "api_key": API_KEY},
        )

        redacted = RiotAPIClient.redact_url(url)

        assert redacted == (
            "https://prod.api.pvp.net/api/lol/euw/v1.1/champion?tag=a%26b%3Dc%20d&api_key=[API-KEY]"
        )
        assert httpx.URL(redacted).params["tag"] == "a&b=c d"

    def test_silent_without_debug(self, api, capsys):
        api.summoner.name("BestLuxEUW")

        assert capsys.readouterr().out == ""


class TestStatusErrors:

    def test_raises_not_found_when_flag_enabled(self, make_client):
        client = make_client(raise_status_errors=True)

        with pytest.raises(ResourceNotFound, match="the server responded with status 404") as exc_info:
            client.summoner.name("fakemcfakename")

        assert exc_info.value.status_code == 404
        assert "[API-KEY]" in exc_info.value.url

    def test_returns_error_payload_when_flag_disabled(self, api):
        result = api.summoner.name("fakemcfakename")

        assert not isinstance(result, Summoner)
        assert result == {"status": {"message": "Not Found", "status_code": 404}}

    def test_transport_failure_raises_connection_failed(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with RiotAPIClient(API_KEY, "euw", transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(ConnectionFailed) as exc_info:
                client.summoner.id(1)

        assert exc_info.value.status_code is None
        assert API_KEY not in str(exc_info.value)
