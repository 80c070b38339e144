"""
Entry-point clients.

Single source of truth for credentials: explicit arguments, falling back to
``ClientSettings`` (``TWILIO_*`` environment variables and ``.env``).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import httpx

from telerest.config import ClientSettings, get_settings
from telerest.rest.http_client import RestClient
from telerest.rest.interface import ConfigurationError
from telerest.rest.resources.accounts import Account, Accounts
from telerest.rest.taskrouter.workspaces import Workspace, Workspaces
from telerest.shared.logging import get_logger

logger = get_logger(__name__)


def _mask(s: str, keep: int = 6) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return f"{s[:keep]}***"


def _credentials(
    account_sid: str | None,
    auth_token: str | None,
    settings: ClientSettings,
) -> tuple[str, str]:
    account_sid = account_sid or settings.account_sid
    auth_token = auth_token or settings.auth_token
    if not account_sid or not auth_token:
        raise ConfigurationError(
            "Account SID and auth token are required",
            error_code="MISSING_CREDENTIALS",
        )
    return account_sid, auth_token


class Client(RestClient):
    """Client for the 2010-04-01 REST API.

    ``client.account`` is the account the credentials belong to; its
    sub-resources are also reachable directly, so ``client.messages`` is
    ``client.account.messages``.
    """

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        *,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = settings or get_settings()
        account_sid, auth_token = _credentials(account_sid, auth_token, settings)
        super().__init__(
            account_sid,
            auth_token,
            host=settings.api_host,
            api_version=settings.api_version,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )

        logger.info(
            "REST client configured",
            extra={
                "account_sid": _mask(account_sid),
                "host": self.host,
                "api_version": self.api_version,
            },
        )

        self.accounts = Accounts(self)
        self.account: Account = self.accounts.get(account_sid)

    def __getattr__(self, name: str) -> Any:
        if name in Account.subresources and "account" in self.__dict__:
            return getattr(self.account, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"<Client account_sid={_mask(self.account_sid)!r}>"


class TaskRouterClient(RestClient):
    """Client for the TaskRouter v1 API (no ``.json`` suffix, meta envelopes).

    With a ``workspace_sid``, the workspace's sub-resources are reachable
    directly: ``client.workers`` is ``client.workspace.workers``.
    """

    json_suffix = False

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        workspace_sid: str | None = None,
        *,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = settings or get_settings()
        account_sid, auth_token = _credentials(account_sid, auth_token, settings)
        super().__init__(
            account_sid,
            auth_token,
            host=settings.taskrouter_host,
            api_version=settings.taskrouter_version,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )

        logger.info(
            "TaskRouter client configured",
            extra={
                "account_sid": _mask(account_sid),
                "host": self.host,
                "workspace_sid": workspace_sid,
            },
        )

        self.workspaces = Workspaces(self)
        self.workspace: Workspace | None = (
            self.workspaces.get(workspace_sid) if workspace_sid else None
        )

    def __getattr__(self, name: str) -> Any:
        workspace = self.__dict__.get("workspace")
        if workspace is not None and name in Workspace.subresources:
            return getattr(workspace, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


@lru_cache(maxsize=1)
def get_client() -> Client:
    """Create and cache a ``Client`` configured from the environment."""
    return Client()
