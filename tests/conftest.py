"""Shared test fixtures."""

import pytest
from linklist.core.document import Document
from linklist.core.href import DefaultHrefResolver
from linklist.core.resolver import LinkListResolver
from linklist.core.store import InMemoryDocumentStore

from tests.helpers import load_document


@pytest.fixture
def flat_document() -> Document:
    """Link list with six links, the first with extra attributes."""
    return load_document("link-list.json")


@pytest.fixture
def nested_parent() -> Document:
    """Link list whose second link is another link list."""
    return load_document("nested-parent.json")


@pytest.fixture
def nested_child() -> Document:
    """Link list with a single web link."""
    return load_document("nested-child.json")


@pytest.fixture
def recursive_child() -> Document:
    """Link list linking back to nested_parent."""
    return load_document("recursive-child.json")


@pytest.fixture
def nested_store(nested_parent: Document, nested_child: Document) -> InMemoryDocumentStore:
    """Store with the nested parent and child, parent bookmarked as main-menu."""
    return InMemoryDocumentStore(
        [nested_parent, nested_child],
        bookmarks={"main-menu": nested_parent.id},
    )


@pytest.fixture
def resolver(nested_store: InMemoryDocumentStore) -> LinkListResolver:
    """Resolver over the nested store with default configuration."""
    return LinkListResolver(nested_store, DefaultHrefResolver())
