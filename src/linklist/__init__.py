"""Nested navigation trees from link list documents."""

from linklist.core.document import Document
from linklist.core.fragments import (
    DocumentLink,
    Fragment,
    GroupFragment,
    LinkFragment,
    MediaLink,
    OpaqueFragment,
    StructuredTextFragment,
    TextFragment,
    WebLink,
)
from linklist.core.href import CallableHrefResolver, DefaultHrefResolver, HrefResolver
from linklist.core.resolver import (
    ClassifiedRecord,
    LinkListResolver,
    LinkNode,
    Traversal,
    classify_record,
    locate_group,
)
from linklist.core.store import DocumentStore, InMemoryDocumentStore
from linklist.errors import (
    ContentApiError,
    CyclicReferenceError,
    DocumentNotFoundError,
    LinkListError,
    MissingOrInvalidGroupError,
)

__all__ = [
    "CallableHrefResolver",
    "ClassifiedRecord",
    "ContentApiError",
    "CyclicReferenceError",
    "DefaultHrefResolver",
    "Document",
    "DocumentLink",
    "DocumentNotFoundError",
    "DocumentStore",
    "Fragment",
    "GroupFragment",
    "HrefResolver",
    "InMemoryDocumentStore",
    "LinkFragment",
    "LinkListError",
    "LinkListResolver",
    "LinkNode",
    "MediaLink",
    "MissingOrInvalidGroupError",
    "OpaqueFragment",
    "StructuredTextFragment",
    "TextFragment",
    "Traversal",
    "WebLink",
    "classify_record",
    "locate_group",
]
