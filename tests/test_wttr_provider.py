from __future__ import annotations

import logging

import pytest
import requests

from weather_core.providers.base import NetworkError, ParseError, RequestConfig
from weather_core.providers.wttr import WttrProvider, build_path

BASE_URL = "https://wttr.example"


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("London", "London"),
        ("New York", "New%20York"),
        ("São Paulo", "S%C3%A3o%20Paulo"),
        ("St. John's", "St.%20John's"),
        ("a/b?c", "a%2Fb%3Fc"),
        (" ", "%20"),
    ],
)
def test_build_path_matches_uri_component_encoding(query, expected) -> None:
    assert build_path(query) == expected


@pytest.mark.parametrize("query", ["", None])
def test_build_path_rejects_empty_query(query) -> None:
    with pytest.raises(ValueError):
        build_path(query)


def test_fetch_issues_single_request_with_fixed_shape(requests_mock, london_payload, monkeypatch) -> None:
    monkeypatch.delenv("REQUESTS_CA_BUNDLE", raising=False)
    monkeypatch.delenv("CURL_CA_BUNDLE", raising=False)
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/New%20York", json=london_payload)

    data = provider.fetch("New York")

    assert data == london_payload
    assert requests_mock.call_count == 1
    request = requests_mock.last_request
    assert request.url == f"{BASE_URL}/New%20York?format=j1"
    assert request.headers["User-Agent"] == "curl/7.68.0"
    assert request.verify is True
    assert request.timeout == 10.0


def test_same_query_builds_same_url() -> None:
    provider = WttrProvider(base_url=BASE_URL + "/")

    assert provider.build_url("Tokyo") == provider.build_url("Tokyo") == f"{BASE_URL}/Tokyo"


def test_fetch_does_not_cache(requests_mock, london_payload) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/London", json=london_payload)

    provider.fetch("London")
    provider.fetch("London")

    assert requests_mock.call_count == 2


def test_insecure_mode_is_opt_in_and_logged(requests_mock, london_payload, caplog) -> None:
    requests_mock.get(f"{BASE_URL}/London", json=london_payload)

    with caplog.at_level(logging.WARNING):
        provider = WttrProvider(base_url=BASE_URL, request_config=RequestConfig(verify_ssl=False))
    provider.fetch("London")

    assert "certificate validation is disabled" in caplog.text
    assert requests_mock.last_request.verify is False


def test_custom_request_config_is_applied(requests_mock, london_payload) -> None:
    config = RequestConfig(timeout=2.5, user_agent="weather-tests/1.0")
    provider = WttrProvider(base_url=BASE_URL, request_config=config)
    requests_mock.get(f"{BASE_URL}/Paris", json=london_payload)

    provider.fetch("Paris")

    assert requests_mock.last_request.timeout == 2.5
    assert requests_mock.last_request.headers["User-Agent"] == "weather-tests/1.0"


def test_injected_session_is_used(requests_mock, london_payload) -> None:
    session = requests.Session()
    provider = WttrProvider(base_url=BASE_URL, session=session)
    requests_mock.get(f"{BASE_URL}/Oslo", json=london_payload)

    assert provider.fetch("Oslo") == london_payload


def test_connection_failure_maps_to_network_error(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/London", exc=requests.exceptions.ConnectionError("connection refused"))

    with pytest.raises(NetworkError, match="Network error: connection refused"):
        provider.fetch("London")
    assert requests_mock.call_count == 1


def test_timeout_maps_to_network_error(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/London", exc=requests.exceptions.ConnectTimeout)

    with pytest.raises(NetworkError, match="timed out after 10.0s"):
        provider.fetch("London")


def test_unknown_location_text_maps_to_parse_error(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/Atlantis", status_code=404, text="Unknown location; please try ~51.5,-0.1")

    with pytest.raises(ParseError, match="Failed to parse weather data"):
        provider.fetch("Atlantis")
    assert requests_mock.call_count == 1


def test_unparseable_server_error_maps_to_parse_error(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/London", status_code=503, text="service unavailable")

    with pytest.raises(ParseError):
        provider.fetch("London")


def test_server_error_with_json_body_maps_to_network_error(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/London", status_code=503, json={"error": "overloaded"})

    with pytest.raises(NetworkError, match="HTTP 503"):
        provider.fetch("London")
    assert requests_mock.call_count == 1


def test_non_json_body_maps_to_parse_error(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)
    requests_mock.get(f"{BASE_URL}/Atlantis", text="Unknown location; please try ~51.5,-0.1")

    with pytest.raises(ParseError, match="Failed to parse weather data"):
        provider.fetch("Atlantis")


def test_empty_query_never_reaches_network(requests_mock) -> None:
    provider = WttrProvider(base_url=BASE_URL)

    with pytest.raises(ValueError):
        provider.fetch("")
    assert requests_mock.call_count == 0
