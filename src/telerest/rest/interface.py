"""
Transport interface and error hierarchy shared by the resource layer.

The resource classes never talk to httpx directly: they go through a
``Transport``, which returns decoded JSON bodies or raises ``TransportError``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping

VERBS = ("list", "get", "create")


class TelerestError(Exception):
    """Base exception for client errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        provider_response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.provider_response = provider_response or {}


class ConfigurationError(TelerestError):
    """A resource or client was set up incorrectly."""


class VerbNotAllowedError(ConfigurationError, AttributeError):
    """A list resource was asked for a verb it does not declare."""


class TransportError(TelerestError):
    """The API answered with a non-2xx status or could not be reached."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        provider_response: dict[str, Any] | None = None,
        status_code: int | None = None,
        more_info: str | None = None,
    ) -> None:
        super().__init__(message, error_code, provider_response)
        self.status_code = status_code
        self.more_info = more_info


class RequestError(TransportError):
    """4xx response."""


class ServerError(TransportError):
    """5xx response."""


@dataclass(frozen=True)
class PageCursor:
    """Where another page of a list lives.

    ``full_url`` cursors carry a host-relative URI that already contains the
    API version and query string; the others are re-resolved as a fresh list
    call against ``url``.
    """

    url: str
    full_url: bool = False
    method: str = "GET"


class Transport(ABC):
    """Synchronous request/response collaborator used by resources."""

    @abstractmethod
    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        full_url: bool = False,
    ) -> dict[str, Any]:
        ...

    @abstractmethod
    def post(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        ...

    @abstractmethod
    def delete(self, path: str) -> bool:
        ...
