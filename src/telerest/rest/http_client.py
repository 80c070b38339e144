"""
httpx-backed transport for the REST API.

Builds request URLs from resource paths, converts parameter keys to the API's
CamelCase, and maps HTTP status codes onto ``TransportError`` subclasses.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from telerest.rest.interface import (
    RequestError,
    ServerError,
    Transport,
    TransportError,
)
from telerest.rest.utils import twilify_params
from telerest.shared.logging import get_logger

logger = get_logger(__name__)

USER_AGENT = "telerest-python/0.1.0"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Charset": "utf-8",
    "User-Agent": USER_AGENT,
}


class RestClient(Transport):
    """Synchronous transport over ``httpx.Client``.

    An injected ``http_client`` is used as-is and is never closed by this
    object; one created lazily here is owned and closed by ``close()``.
    """

    json_suffix = True

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        *,
        host: str,
        api_version: str,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.account_sid = account_sid
        self._auth_token = auth_token
        self.host = host
        self.api_version = api_version
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=httpx.Timeout(self._timeout))
        return self._http_client

    def close(self) -> None:
        if self._owns_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_auth(self) -> tuple[str, str]:
        return (self.account_sid, self._auth_token)

    def build_url(self, path: str, full_url: bool = False) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if full_url:
            return f"https://{self.host}{path}"
        suffix = ".json" if self.json_suffix else ""
        return f"https://{self.host}/{self.api_version}{path}{suffix}"

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        full_url: bool = False,
    ) -> dict[str, Any]:
        return self._request("GET", self.build_url(path, full_url), params=twilify_params(params))

    def post(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self._request("POST", self.build_url(path), data=twilify_params(params))

    def delete(self, path: str) -> bool:
        self._request("DELETE", self.build_url(path))
        return True

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        client = self._get_client()

        logger.debug("API request", extra={"method": method, "url": url})

        try:
            response = client.request(
                method,
                url,
                params=params or None,
                data=data or None,
                auth=self._get_auth(),
                headers=DEFAULT_HEADERS,
            )
        except httpx.HTTPError as e:
            logger.exception(
                "HTTP error during API request",
                extra={"method": method, "url": url},
            )
            raise TransportError(
                message=f"HTTP error: {e!s}",
                error_code="HTTP_ERROR",
            ) from e

        if response.status_code >= 400:
            raise self._error_from(response, method, url)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                message="Response body is not valid JSON",
                error_code="INVALID_JSON",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_from(response: httpx.Response, method: str, url: str) -> TransportError:
        try:
            error_data = response.json() if response.content else {}
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {}

        logger.error(
            "API request failed",
            extra={
                "method": method,
                "url": url,
                "status_code": response.status_code,
                "error": error_data,
            },
        )

        error_class = ServerError if response.status_code >= 500 else RequestError
        return error_class(
            message=error_data.get("message", f"HTTP {response.status_code}"),
            error_code=str(error_data.get("code", response.status_code)),
            provider_response=error_data,
            status_code=response.status_code,
            more_info=error_data.get("more_info"),
        )
