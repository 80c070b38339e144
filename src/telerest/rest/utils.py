"""Key-case conversion between the API's CamelCase and Python snake_case."""

import re
from typing import Any, Mapping

from telerest.rest.interface import ConfigurationError

_CAMEL_BOUNDARY = re.compile(r"(.)([A-Z])")


def twilify(name: str) -> str:
    """``status_callback`` -> ``StatusCallback``. CamelCase input is kept."""
    return "".join(part[:1].upper() + part[1:] for part in str(name).split("_"))


def detwilify(name: str) -> str:
    """``DateCreated`` -> ``date_created``. snake_case input is kept."""
    return _CAMEL_BOUNDARY.sub(r"\1_\2", str(name)).lower()


def twilify_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    return {twilify(key): value for key, value in params.items()}


def resolve_path(template: str, inheritance: Mapping[str, Any], owner: str) -> str:
    """Fill a ``/Accounts/{account_sid}/Calls`` style template."""
    try:
        return template.format(**inheritance)
    except KeyError as e:
        raise ConfigurationError(
            f"{owner} needs {e.args[0]!r} in its inheritance context to build {template!r}"
        ) from e
