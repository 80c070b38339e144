"""
In-process fake API backend for tests.

A ``Holodeck`` holds canned responses (``Hologram``) and serves them through
``httpx.MockTransport``, so a real ``Client`` can be exercised end to end
without the network. Every request is recorded; unmatched requests get the
API's 404 error body.

    holodeck = Holodeck()
    holodeck.mock(Hologram("GET", url, content={"sid": "AC123"}))
    client = Client("AC123", "token", http_client=holodeck.http_client())
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class Hologram:
    """One canned response.

    ``params`` (query string for GET, form body otherwise) and ``auth`` are
    only checked when set. A query string in ``url`` must match exactly.
    """

    method: str
    url: str
    status_code: int = 200
    content: Any = None
    params: dict[str, str] | None = None
    auth: tuple[str, str] | None = None

    def matches(self, request: httpx.Request) -> bool:
        if request.method != self.method.upper():
            return False

        expected = httpx.URL(self.url)
        if (request.url.scheme, request.url.host, request.url.path) != (
            expected.scheme,
            expected.host,
            expected.path,
        ):
            return False
        if expected.query and dict(request.url.params) != dict(expected.params):
            return False

        if self.params is not None and _request_params(request) != self.params:
            return False

        if self.auth is not None:
            return request.headers.get("Authorization") == _basic_auth(*self.auth)

        return True

    def to_response(self) -> httpx.Response:
        if self.content is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.content)


def _basic_auth(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _request_params(request: httpx.Request) -> dict[str, str]:
    if request.method == "GET":
        return dict(request.url.params)
    return dict(httpx.QueryParams(request.content.decode("utf-8")))


class Holodeck:
    def __init__(self) -> None:
        self.holograms: list[Hologram] = []
        self.requests: list[httpx.Request] = []

    def mock(self, hologram: Hologram) -> Hologram:
        # Later holograms win over earlier ones for the same request.
        self.holograms.insert(0, hologram)
        return hologram

    def add(
        self,
        method: str,
        url: str,
        content: Any = None,
        status_code: int = 200,
        **kwargs: Any,
    ) -> Hologram:
        return self.mock(Hologram(method, url, status_code=status_code, content=content, **kwargs))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport())

    def reset(self) -> None:
        self.holograms.clear()
        self.requests.clear()

    @property
    def request_count(self) -> int:
        return len(self.requests)

    def has_request(self, method: str, url: str) -> bool:
        probe = Hologram(method, url)
        return any(probe.matches(request) for request in self.requests)

    def last_request(self) -> httpx.Request | None:
        return self.requests[-1] if self.requests else None

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for hologram in self.holograms:
            if hologram.matches(request):
                return hologram.to_response()
        return httpx.Response(
            404,
            content=json.dumps(
                {
                    "code": 20404,
                    "message": f"The requested resource {request.url.path} was not found",
                    "more_info": "https://www.twilio.com/docs/errors/20404",
                    "status": 404,
                }
            ),
            headers={"Content-Type": "application/json"},
        )
