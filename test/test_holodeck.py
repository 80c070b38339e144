"""Tests for the fake API backend used throughout the suite."""

import httpx

from telerest.holodeck import Hologram, Holodeck


class TestHolodeck:
    def test_serves_matching_hologram(self) -> None:
        holodeck = Holodeck()
        holodeck.add("GET", "https://api.example.com/v1/Things", {"things": []})

        with holodeck.http_client() as http_client:
            response = http_client.get("https://api.example.com/v1/Things")

        assert response.status_code == 200
        assert response.json() == {"things": []}
        assert holodeck.request_count == 1

    def test_unmatched_request_is_404_api_error(self) -> None:
        holodeck = Holodeck()

        with holodeck.http_client() as http_client:
            response = http_client.post("https://api.example.com/v1/Things")

        assert response.status_code == 404
        assert response.json()["code"] == 20404
        assert holodeck.has_request("POST", "https://api.example.com/v1/Things")

    def test_later_holograms_win(self) -> None:
        holodeck = Holodeck()
        holodeck.add("GET", "https://api.example.com/v1/Things", {"version": 1})
        holodeck.add("GET", "https://api.example.com/v1/Things", {"version": 2})

        with holodeck.http_client() as http_client:
            assert http_client.get("https://api.example.com/v1/Things").json() == {"version": 2}

    def test_auth_and_params_are_checked_when_set(self) -> None:
        hologram = Hologram(
            "POST",
            "https://api.example.com/v1/Things",
            params={"Name": "a"},
            auth=("user", "pass"),
        )
        good = httpx.Request("POST", "https://api.example.com/v1/Things", data={"Name": "a"})
        good.headers["Authorization"] = "Basic dXNlcjpwYXNz"
        wrong_params = httpx.Request("POST", "https://api.example.com/v1/Things", data={"Name": "b"})
        wrong_params.headers["Authorization"] = "Basic dXNlcjpwYXNz"
        no_auth = httpx.Request("POST", "https://api.example.com/v1/Things", data={"Name": "a"})

        assert hologram.matches(good)
        assert not hologram.matches(wrong_params)
        assert not hologram.matches(no_auth)

    def test_reset(self) -> None:
        holodeck = Holodeck()
        holodeck.add("GET", "https://api.example.com/v1/Things", {})
        with holodeck.http_client() as http_client:
            http_client.get("https://api.example.com/v1/Things")

        holodeck.reset()

        assert holodeck.holograms == []
        assert holodeck.last_request() is None
