"""
Pytest configuration and fixtures for the client tests.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from telerest.config import ClientSettings
from telerest.holodeck import Holodeck
from telerest.rest.client import Client, TaskRouterClient

ACCOUNT_SID = "ACaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
AUTH_TOKEN = "AUTHTOKEN"
WORKSPACE_SID = "WSaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Keep a developer's TWILIO_* variables or .env file out of the tests.
    for name in (
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_API_HOST",
        "TWILIO_API_VERSION",
        "TWILIO_TASKROUTER_HOST",
        "TWILIO_TASKROUTER_VERSION",
        "TWILIO_TIMEOUT_SECONDS",
        "TWILIO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(account_sid=ACCOUNT_SID, auth_token=AUTH_TOKEN)


@pytest.fixture
def holodeck() -> Holodeck:
    return Holodeck()


@pytest.fixture
def client(holodeck: Holodeck, settings: ClientSettings) -> Generator[Client, None, None]:
    http_client = holodeck.http_client()
    rest_client = Client(settings=settings, http_client=http_client)
    yield rest_client
    http_client.close()


@pytest.fixture
def taskrouter_client(
    holodeck: Holodeck,
    settings: ClientSettings,
) -> Generator[TaskRouterClient, None, None]:
    http_client = holodeck.http_client()
    rest_client = TaskRouterClient(
        workspace_sid=WORKSPACE_SID,
        settings=settings,
        http_client=http_client,
    )
    yield rest_client
    http_client.close()
