"""
List resources: collection endpoints such as ``/Accounts/{account_sid}/Messages``.

Verbs are opt-in. A resource type supports ``list``, ``get`` and ``create``
only when it mixes in ``Listable``, ``Gettable`` or ``Creatable``; a verb that
was not declared does not exist on the class, and looking it up on an instance
raises ``VerbNotAllowedError`` before anything is called.

Every class names its instance type and its components explicitly::

    class Messages(Listable, Gettable, Creatable, ListResource):
        path_template = "/Accounts/{account_sid}/Messages"
        instance_class = Message
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterator, Mapping

from telerest.rest.instance_resource import InstanceResource
from telerest.rest.interface import (
    VERBS,
    ConfigurationError,
    Transport,
    VerbNotAllowedError,
)
from telerest.rest.page import Page, cursor_from
from telerest.rest.utils import detwilify, resolve_path
from telerest.shared.logging import get_logger

logger = get_logger(__name__)

# Set in ListResource.__init__, so invisible to a class-level hasattr check.
_INSTANCE_ATTRIBUTES = frozenset({"path", "_client", "_inheritance", "_base_path"})


class ListResource:
    path_template: ClassVar[str] = ""
    list_key: ClassVar[str | None] = None
    instance_id_key: ClassVar[str] = "sid"
    instance_class: ClassVar[type[InstanceResource] | None] = None
    components: ClassVar[Mapping[str, type[ListResource]]] = {}
    command_alias: ClassVar[str | None] = None
    allowed_verbs: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.allowed_verbs = frozenset(verb for verb in VERBS if callable(getattr(cls, verb, None)))

        exposed: set[str] = set()
        for name, component_class in cls.components.items():
            if not (isinstance(component_class, type) and issubclass(component_class, ListResource)):
                raise ConfigurationError(f"Component {name} of {cls.__name__} does not exist")
            attribute = component_class.command_alias or name
            if attribute in exposed or attribute in _INSTANCE_ATTRIBUTES or hasattr(cls, attribute):
                raise ConfigurationError(
                    f"Component {name} of {cls.__name__} clashes with attribute {attribute!r}"
                )
            exposed.add(attribute)

    def __init__(
        self,
        client: Transport | None,
        inheritance: Mapping[str, Any] | None = None,
        *,
        path: str | None = None,
    ) -> None:
        self._client = client
        self._inheritance = dict(inheritance or {})
        self._base_path = resolve_path(self.path_template, self._inheritance, type(self).__name__)
        self.path = path if path is not None else self._base_path

        for name, component_class in self.components.items():
            component = component_class(client, self._inheritance)
            setattr(self, component_class.command_alias or name, component)

    def __getattr__(self, name: str) -> Any:
        if name in VERBS:
            raise VerbNotAllowedError(
                f"{type(self).__name__} does not support {name!r}; "
                f"allowed verbs: {sorted(self.allowed_verbs)}"
            )
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} path={self.path!r}>"

    @property
    def inheritance(self) -> dict[str, Any]:
        return dict(self._inheritance)

    def get_list_key(self) -> str:
        return self.list_key or detwilify(type(self).__name__)

    def at(self, path: str) -> ListResource:
        """Same resource, same context, pointed at another page URL."""
        return type(self)(self._client, self._inheritance, path=path)

    def _instance(
        self,
        properties: Mapping[str, Any] | None,
        *,
        loaded: bool | None = None,
    ) -> InstanceResource:
        if self.instance_class is None:
            raise ConfigurationError(f"{type(self).__name__} declares no instance_class")
        # Match on the same snake_cased keys the instance exposes.
        properties = {detwilify(key): value for key, value in (properties or {}).items()}
        identifier = properties.get(self.instance_id_key)
        path = f"{self._base_path}/{identifier}" if identifier is not None else None
        return self.instance_class(
            self._client,
            self._inheritance,
            properties,
            path=path,
            instance_id_key=self.instance_id_key,
            loaded=loaded,
        )

    def _list(self, params: Mapping[str, Any] | None = None, full_path: bool = False) -> Page:
        if self._client is None:
            raise ConfigurationError("Can't get a resource list without a REST client")

        response = self._client.get(self.path, params or {}, full_path)

        meta = response.get("meta") or {}
        list_key = meta.get("key") or self.get_list_key()
        records = response.get(list_key) or []

        logger.debug(
            "Listed resources",
            extra={"path": self.path, "list_key": list_key, "count": len(records)},
        )

        return Page(
            [self._instance(record) for record in records],
            resource=self,
            next_cursor=cursor_from(response, "next"),
            previous_cursor=cursor_from(response, "previous"),
            total=response.get("total"),
        )

    def _get(self, sid: str) -> InstanceResource:
        # No request here: a missing record only surfaces on first attribute read.
        return self._instance({self.instance_id_key: sid}, loaded=False)

    def _create(self, params: Mapping[str, Any] | None = None) -> InstanceResource:
        if self._client is None:
            raise ConfigurationError("Can't create a resource without a REST client")
        response = self._client.post(self._base_path, params or {})
        return self._instance(response, loaded=True)


class Listable(ListResource):
    def list(
        self,
        params: Mapping[str, Any] | None = None,
        full_path: bool = False,
        **filters: Any,
    ) -> Page:
        """Fetch one page of this collection.

        ``params`` and ``filters`` are merged; use ``params`` for filter names
        that are not valid identifiers, e.g. ``{"DateSent>": "2015-01-01"}``.
        """
        return self._list({**(params or {}), **filters}, full_path)

    def iter(self, params: Mapping[str, Any] | None = None, **filters: Any) -> Iterator[InstanceResource]:
        """Yield every instance, following next-page cursors until exhausted."""
        page = self.list(params, **filters)
        while True:
            yield from page
            if not page.has_next:
                return
            page = page.next_page()


class Gettable(ListResource):
    def get(self, sid: str) -> InstanceResource:
        return self._get(sid)


class Creatable(ListResource):
    def create(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> InstanceResource:
        return self._create({**(params or {}), **kwargs})
