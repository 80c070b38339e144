"""Client library for the Twilio-style telephony REST API."""

from telerest.rest.client import Client, TaskRouterClient, get_client
from telerest.rest.interface import (
    ConfigurationError,
    RequestError,
    ServerError,
    TelerestError,
    TransportError,
    VerbNotAllowedError,
)
from telerest.rest.page import Page

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ConfigurationError",
    "Page",
    "RequestError",
    "ServerError",
    "TaskRouterClient",
    "TelerestError",
    "TransportError",
    "VerbNotAllowedError",
    "get_client",
]
