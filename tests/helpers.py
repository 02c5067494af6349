"""Builders for documents used across tests."""

import json
from pathlib import Path

from linklist.core.document import Document
from linklist.core.fragments import (
    DocumentLink,
    Fragment,
    GroupFragment,
    TextFragment,
    WebLink,
)
from linklist.core.types import DocumentId

DATA_DIR = Path(__file__).parent / "data"


def load_document(name: str) -> Document:
    """Load a document fixture from tests/data."""
    data = json.loads((DATA_DIR / name).read_text(encoding="utf-8"))
    return Document.from_dict(data)


def web_record(url: str, text: str | None = None, **attributes: str) -> dict[str, Fragment]:
    """Record with a web link, optional anchor text and text attributes."""
    record: dict[str, Fragment] = {"link": WebLink(url=url)}
    if text is not None:
        record["text"] = TextFragment(text)
    for name, value in attributes.items():
        record[name.replace("_", "-")] = TextFragment(value)
    return record


def list_record(
    document_id: str,
    text: str | None = None,
    doc_type: str = "link-list",
) -> dict[str, Fragment]:
    """Record linking to another document."""
    record: dict[str, Fragment] = {"link": DocumentLink(id=document_id, type=doc_type)}
    if text is not None:
        record["text"] = TextFragment(text)
    return record


def make_link_list(
    document_id: str,
    *records: dict[str, Fragment],
    doc_type: str = "link-list",
    fragment_name: str = "links",
) -> Document:
    """Link list document holding the given records."""
    return Document(
        id=DocumentId(document_id),
        type=doc_type,
        fragments={fragment_name: GroupFragment(records=tuple(records))},
    )
