"""Href resolution for links that are not expanded as submenus."""

from collections.abc import Callable
from typing import Protocol

from linklist.core.fragments import DocumentLink, LinkFragment, MediaLink, WebLink

DEFAULT_DOCUMENT_PATTERN = "/{type}/{uid}"


class HrefResolver(Protocol):
    """Turns a link into the destination href."""

    def resolve(self, link: LinkFragment) -> str | None: ...


class DefaultHrefResolver:
    """Resolve web and media links to their URL, documents by pattern.

    The pattern may reference ``{id}``, ``{uid}``, ``{type}``, ``{slug}``
    and ``{lang}``. ``{uid}`` falls back to the document id when the
    document has no uid. Broken document links resolve to None.
    """

    def __init__(self, document_pattern: str = DEFAULT_DOCUMENT_PATTERN) -> None:
        self.document_pattern = document_pattern

    def resolve(self, link: LinkFragment) -> str | None:
        if isinstance(link, WebLink | MediaLink):
            return link.url
        if isinstance(link, DocumentLink):
            if link.is_broken:
                return None
            return self.document_pattern.format(
                id=link.id,
                uid=link.uid or link.id,
                type=link.type,
                slug=link.slug or "",
                lang=link.lang or "",
            )
        return None


class CallableHrefResolver:
    """Adapt a plain function to the HrefResolver protocol."""

    def __init__(self, func: Callable[[LinkFragment], str | None]) -> None:
        self.func = func

    def resolve(self, link: LinkFragment) -> str | None:
        return self.func(link)
