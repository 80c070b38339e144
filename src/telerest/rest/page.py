"""
Paged list results.

A ``Page`` is a plain immutable sequence of instance resources plus the
cursors needed to reach its neighbours. Following a cursor is done by
``fetch_page``; a page without a cursor in a direction yields an empty page
and performs no request.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Iterator, overload

from telerest.rest.interface import PageCursor

if TYPE_CHECKING:
    from telerest.rest.instance_resource import InstanceResource
    from telerest.rest.list_resource import ListResource


class Page(Sequence):
    def __init__(
        self,
        items: Sequence[InstanceResource] = (),
        *,
        resource: ListResource | None = None,
        next_cursor: PageCursor | None = None,
        previous_cursor: PageCursor | None = None,
        total: int | None = None,
    ) -> None:
        self._items = tuple(items)
        self._resource = resource
        self.next_cursor = next_cursor
        self.previous_cursor = previous_cursor
        self.total = total

    @classmethod
    def empty(cls, resource: ListResource | None = None) -> Page:
        return cls((), resource=resource)

    @overload
    def __getitem__(self, index: int) -> InstanceResource: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[InstanceResource, ...]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[InstanceResource]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (
            f"<Page items={len(self._items)} "
            f"has_next={self.has_next} has_previous={self.has_previous}>"
        )

    @property
    def has_next(self) -> bool:
        return self.next_cursor is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_cursor is not None

    def next_page(self) -> Page:
        return fetch_page(self._resource, self.next_cursor)

    def previous_page(self) -> Page:
        return fetch_page(self._resource, self.previous_cursor)


def cursor_from(response: dict[str, Any], direction: str) -> PageCursor | None:
    """Read the ``previous``/``next`` cursor from either envelope style."""
    uri = response.get(f"{direction}_page_uri")
    if uri:
        return PageCursor(url=uri, full_url=True)

    meta = response.get("meta") or {}
    url = meta.get(f"{direction}_page_url")
    if url:
        return PageCursor(url=url, full_url=False)

    return None


def fetch_page(resource: ListResource | None, cursor: PageCursor | None) -> Page:
    """Follow ``cursor`` with one GET, or return an empty page if there is none."""
    if cursor is None or resource is None:
        return Page.empty(resource)
    return resource.at(cursor.url)._list({}, full_path=cursor.full_url)
