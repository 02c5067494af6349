"""Link tree resolver.

Turns the group of link records in a link list document into a nested
tree of links for menus and navigation lists. Links to other link list
documents are expanded inline as submenus.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple, TypedDict

from linklist.core.document import Document
from linklist.core.fragments import DocumentLink, Fragment, GroupFragment, LinkFragment
from linklist.core.href import HrefResolver
from linklist.core.store import DocumentStore
from linklist.errors import (
    CyclicReferenceError,
    DocumentNotFoundError,
    MissingOrInvalidGroupError,
)

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_TYPE = "link-list"
DEFAULT_FRAGMENT_NAME = "links"
ANCHOR_FIELD = "text"


class LinkNodeDict(TypedDict):
    """Dictionary representation of a link node."""

    text: str
    attributes: dict[str, str | None]
    children: list[LinkNodeDict]


@dataclass(frozen=True)
class LinkNode:
    """Single link with its html attributes and nested child links.

    Attributes are stored as a read-only copy, so a returned tree cannot be
    changed by its consumers.
    """

    text: str
    attributes: Mapping[str, str | None] = field(
        default_factory=lambda: MappingProxyType({}),
        hash=False,
    )
    children: tuple[LinkNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def href(self) -> str | None:
        return self.attributes.get("href")

    def to_dict(self) -> LinkNodeDict:
        """Convert to dictionary for templates and JSON serialization."""
        return {
            "text": self.text,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self.children],
        }


class ClassifiedRecord(NamedTuple):
    """Group record split into link, anchor text and leftover attributes."""

    link: LinkFragment | None
    anchor: Fragment | None
    attributes: dict[str, Fragment]


class Traversal:
    """Document ids open on the current expansion path.

    Built fresh for every top-level resolution. A document may appear in
    several branches of the tree, but never twice on one path.
    """

    __slots__ = ("_open", "_path")

    def __init__(self) -> None:
        self._path: list[str] = []
        self._open: set[str] = set()

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self._path)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._open

    @contextmanager
    def enter(self, document_id: str) -> Iterator[None]:
        """Keep document_id open while its descendants resolve.

        Raises:
            CyclicReferenceError: If document_id is already open
        """
        if document_id in self._open:
            raise CyclicReferenceError(document_id)
        self._path.append(document_id)
        self._open.add(document_id)
        try:
            yield
        finally:
            self._path.pop()
            self._open.discard(document_id)


def locate_group(document: Document, fragment_name: str) -> GroupFragment:
    """Locate the group fragment holding the link records.

    Args:
        document: Link list document
        fragment_name: Field name of the group, relative to the document type

    Returns:
        Group fragment

    Raises:
        MissingOrInvalidGroupError: If the field is absent or not a group
    """
    group = document.get(f"{document.type}.{fragment_name}")
    if not isinstance(group, GroupFragment):
        raise MissingOrInvalidGroupError(document.id, document.type, fragment_name)
    return group


def classify_record(record: Mapping[str, Fragment]) -> ClassifiedRecord:
    """Split a group record into link, anchor text and attributes.

    Any link fragment is taken as the link. Records are expected to carry
    at most one; when there are several the last one wins. The field named
    ``text`` is the anchor. Every other field is an attribute.
    """
    link: LinkFragment | None = None
    anchor: Fragment | None = None
    attributes: dict[str, Fragment] = {}

    for name, fragment in record.items():
        if isinstance(fragment, LinkFragment):
            if link is not None:
                logger.warning(f"Record has more than one link, using field {name!r}")
            link = fragment
        elif name == ANCHOR_FIELD:
            anchor = fragment
        else:
            attributes[name] = fragment

    return ClassifiedRecord(link, anchor, attributes)


class LinkListResolver:
    """Resolve link list documents into trees of LinkNode."""

    def __init__(
        self,
        store: DocumentStore,
        href_resolver: HrefResolver,
        *,
        document_type: str = DEFAULT_DOCUMENT_TYPE,
        fragment_name: str = DEFAULT_FRAGMENT_NAME,
    ) -> None:
        """Initialize resolver.

        Args:
            store: Source of documents and bookmarks
            href_resolver: Resolves hrefs for links that are not submenus
            document_type: Document type expanded as a nested link list
            fragment_name: Field holding the group of link records
        """
        self.store = store
        self.href_resolver = href_resolver
        self.document_type = document_type
        self.fragment_name = fragment_name

    def resolve_bookmark(self, bookmark: str) -> list[LinkNode]:
        """Resolve the document registered under a bookmark.

        Raises:
            DocumentNotFoundError: If the bookmark maps to no document
        """
        document_id = self.store.get_bookmark(bookmark)
        if document_id is None:
            raise DocumentNotFoundError(bookmark, kind="bookmark")
        return self.resolve_id(document_id)

    def resolve_id(self, document_id: str) -> list[LinkNode]:
        """Resolve the document with the given id.

        Raises:
            DocumentNotFoundError: If no document has this id
        """
        return self.resolve_document(self._fetch(document_id))

    def resolve_document(self, document: Document) -> list[LinkNode]:
        """Resolve the links of a link list document.

        Args:
            document: Root link list document

        Returns:
            Link nodes in group order; records without a link are skipped

        Raises:
            MissingOrInvalidGroupError: If a link list has no links group
            CyclicReferenceError: If a link list links to one of its ancestors
            DocumentNotFoundError: If a linked link list does not exist
        """
        traversal = Traversal()
        with traversal.enter(document.id):
            return self._resolve_group(document, traversal)

    def _resolve_group(self, document: Document, traversal: Traversal) -> list[LinkNode]:
        group = locate_group(document, self.fragment_name)
        nodes: list[LinkNode] = []
        for index, record in enumerate(group.records):
            link, anchor, attributes = classify_record(record)
            if link is None:
                logger.debug(f"Skipping record {index} of {document.id}: no link")
                continue
            nodes.append(self._build_node(link, anchor, attributes, traversal))
        return nodes

    def _build_node(
        self,
        link: LinkFragment,
        anchor: Fragment | None,
        attributes: Mapping[str, Fragment],
        traversal: Traversal,
    ) -> LinkNode:
        """Build a LinkNode, recursing into nested link lists."""
        text = anchor.as_text() if anchor is not None else ""

        children: list[LinkNode] = []
        href: str | None
        if isinstance(link, DocumentLink) and link.type == self.document_type:
            href = None
            if link.id in traversal:
                raise CyclicReferenceError(link.id)
            document = self._fetch(link.id)
            logger.debug(f"Expanding link list {link.id} below {traversal.path}")
            with traversal.enter(document.id):
                children = self._resolve_group(document, traversal)
        else:
            href = self.href_resolver.resolve(link)

        node_attributes: dict[str, str | None] = {"href": href}
        for name, fragment in attributes.items():
            node_attributes[name] = fragment.as_text()

        return LinkNode(text=text, attributes=node_attributes, children=tuple(children))

    def _fetch(self, document_id: str) -> Document:
        document = self.store.get_by_id(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id, kind="id")
        return document
