"""
Instance resources: one remote entity with lazily loaded attributes.

An instance built from a list or create response already carries its full
representation. One built by ``ListResource.get`` carries only its identifier
and fetches the rest with a single GET the first time an unknown attribute is
read. Records without an identifier (usage records, number search results)
have no ``path`` and cannot be refreshed, updated or deleted.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from telerest.rest.interface import ConfigurationError, Transport
from telerest.rest.utils import detwilify, resolve_path
from telerest.shared.logging import get_logger

logger = get_logger(__name__)


class InstanceResource:
    """Base class for a single entity of the API.

    Subclasses declare:
        path_template: used only when the instance is a singleton
            sub-resource (e.g. workspace statistics) and no path is given.
        inheritance_key: name under which this instance's identifier is
            passed down to its sub-resources (e.g. ``account_sid``).
        subresources: ``{name: class}`` of list resources or singleton
            instance resources nested under this instance.
    """

    path_template: ClassVar[str] = ""
    inheritance_key: ClassVar[str | None] = None
    subresources: ClassVar[Mapping[str, type]] = {}

    def __init__(
        self,
        client: Transport | None,
        inheritance: Mapping[str, Any] | None = None,
        properties: Mapping[str, Any] | None = None,
        *,
        path: str | None = None,
        instance_id_key: str = "sid",
        loaded: bool | None = None,
    ) -> None:
        self._client = client
        self._inheritance = dict(inheritance or {})
        self.instance_id_key = instance_id_key
        if path is None and self.path_template:
            path = resolve_path(self.path_template, self._inheritance, type(self).__name__)
        self.path: str | None = path
        self._properties: dict[str, Any] = {}
        self._subresources: dict[str, Any] | None = None
        self._set_up_properties(properties or {})
        self._loaded = bool(properties) if loaded is None else loaded

    def __repr__(self) -> str:
        return f"<{type(self).__name__} path={self.path!r}>"

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)

        subresources = self._wire_subresources()
        if name in subresources:
            return subresources[name]

        if name in self._properties:
            return self._properties[name]

        if not self._loaded:
            self.refresh()
            if name in self._properties:
                return self._properties[name]

        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    @property
    def inheritance(self) -> dict[str, Any]:
        return dict(self._inheritance)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def properties(self) -> dict[str, Any]:
        if not self._loaded:
            self.refresh()
        return dict(self._properties)

    def refresh(self) -> InstanceResource:
        path = self._require_path("refresh")
        logger.debug("Loading instance attributes", extra={"path": path})
        self._properties = {}
        self._set_up_properties(self._client.get(path))
        self._loaded = True
        return self

    def update(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> InstanceResource:
        path = self._require_path("update")
        response = self._client.post(path, {**(params or {}), **kwargs})
        self._set_up_properties(response)
        self._loaded = True
        return self

    def delete(self) -> bool:
        return self._client.delete(self._require_path("delete"))

    def _require_path(self, action: str) -> str:
        if self._client is None:
            raise ConfigurationError(f"Can't {action} a resource without a REST client")
        if not self.path:
            raise ConfigurationError(
                f"Can't {action} {type(self).__name__}: it has no {self.instance_id_key!r} to address it by"
            )
        return self.path

    def _set_up_properties(self, response: Mapping[str, Any]) -> None:
        for key, value in response.items():
            self._properties[detwilify(key)] = value

    def _child_inheritance(self) -> dict[str, Any]:
        if self.inheritance_key is None:
            return dict(self._inheritance)
        identifier = self._properties.get(self.instance_id_key)
        if identifier is None:
            raise ConfigurationError(
                f"{type(self).__name__} has no {self.instance_id_key!r} to pass to its sub-resources"
            )
        return {**self._inheritance, self.inheritance_key: identifier}

    def _wire_subresources(self) -> dict[str, Any]:
        if self._subresources is None:
            if not self.subresources:
                self._subresources = {}
            else:
                inheritance = self._child_inheritance()
                self._subresources = {
                    name: resource_class(self._client, inheritance)
                    for name, resource_class in self.subresources.items()
                }
        return self._subresources
