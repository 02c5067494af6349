"""Document stores the resolver fetches link lists from."""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from linklist.core.document import Document
from linklist.core.types import DocumentId

logger = logging.getLogger(__name__)

BOOKMARKS_FILENAME = "bookmarks.json"


class DocumentStore(Protocol):
    """Source of documents and bookmarks."""

    def get_by_id(self, document_id: str) -> Document | None: ...

    def get_bookmark(self, name: str) -> str | None: ...


class InMemoryDocumentStore:
    """Document store backed by dictionaries."""

    def __init__(
        self,
        documents: Iterable[Document] = (),
        bookmarks: Mapping[str, str] | None = None,
    ) -> None:
        self._documents: dict[str, Document] = {doc.id: doc for doc in documents}
        self._bookmarks: dict[str, str] = dict(bookmarks or {})

    def add(self, document: Document) -> None:
        """Add or replace a document."""
        self._documents[document.id] = document

    def set_bookmark(self, name: str, document_id: DocumentId) -> None:
        """Map a bookmark name to a document id."""
        self._bookmarks[name] = document_id

    def get_by_id(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    def get_bookmark(self, name: str) -> str | None:
        return self._bookmarks.get(name)

    @classmethod
    def from_directory(cls, directory: Path) -> "InMemoryDocumentStore":
        """Load documents from a directory of JSON files.

        Every ``*.json`` file except ``bookmarks.json`` holds one document in
        the content API format. ``bookmarks.json``, when present, maps
        bookmark names to document ids.

        Args:
            directory: Directory containing the JSON files

        Returns:
            Store with all documents and bookmarks loaded

        Raises:
            FileNotFoundError: If directory doesn't exist
            ValueError: If a file is not a valid document
        """
        if not directory.is_dir():
            raise FileNotFoundError(f"Fixtures directory not found: {directory}")

        store = cls()
        for path in sorted(directory.glob("*.json")):
            if path.name == BOOKMARKS_FILENAME:
                continue
            data = json.loads(path.read_text(encoding="utf-8"))
            try:
                store.add(Document.from_dict(data))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Invalid document in {path}: {e}") from e

        bookmarks_path = directory / BOOKMARKS_FILENAME
        if bookmarks_path.exists():
            bookmarks = json.loads(bookmarks_path.read_text(encoding="utf-8"))
            if not isinstance(bookmarks, dict):
                raise ValueError(f"{bookmarks_path} must contain an object")
            for name, document_id in bookmarks.items():
                store.set_bookmark(name, DocumentId(str(document_id)))

        logger.info(
            f"Loaded {len(store._documents)} documents and "
            f"{len(store._bookmarks)} bookmarks from {directory}"
        )
        return store
