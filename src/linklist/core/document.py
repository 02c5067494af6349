"""Documents fetched from the content repository."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NotRequired, TypedDict

from linklist.core.fragments import Fragment, FragmentDict, parse_record
from linklist.core.types import DocumentId


class DocumentDict(TypedDict):
    """Document as returned by the content API."""

    id: str
    type: str
    data: dict[str, dict[str, FragmentDict]]
    uid: NotRequired[str | None]
    lang: NotRequired[str]
    tags: NotRequired[list[str]]
    slugs: NotRequired[list[str]]
    href: NotRequired[str]


@dataclass(frozen=True)
class Document:
    """Content document with named fragments.

    Fragments are addressed as ``"{type}.{field}"``, the same way the
    content API namespaces them under the document type.
    """

    id: DocumentId
    type: str
    fragments: Mapping[str, Fragment] = field(default_factory=dict)
    uid: str | None = None
    lang: str | None = None
    tags: tuple[str, ...] = ()
    slugs: tuple[str, ...] = ()

    def get(self, path: str) -> Fragment | None:
        """Get fragment by path.

        Args:
            path: Fragment path (e.g., "link-list.links")

        Returns:
            Fragment if found, None otherwise
        """
        prefix = f"{self.type}."
        if not path.startswith(prefix):
            return None
        return self.fragments.get(path.removeprefix(prefix))

    @property
    def slug(self) -> str | None:
        """Current slug, if any."""
        return self.slugs[0] if self.slugs else None

    @classmethod
    def from_dict(cls, data: DocumentDict) -> Document:
        """Parse document from its API representation.

        Args:
            data: Document dictionary

        Returns:
            Document instance

        Raises:
            ValueError: If the document structure is invalid
        """
        if not isinstance(data, dict):
            raise ValueError("Document must be a dictionary")
        if not isinstance(data.get("id"), str):
            raise ValueError("Document id must be a string")
        if not isinstance(data.get("type"), str):
            raise ValueError("Document type must be a string")

        doc_type = data["type"]
        raw: Any = data.get("data", {}).get(doc_type, {})
        if not isinstance(raw, dict):
            raise ValueError(f"Document data for {doc_type} must be a dictionary")

        return cls(
            id=DocumentId(data["id"]),
            type=doc_type,
            fragments=parse_record(raw),
            uid=data.get("uid"),
            lang=data.get("lang"),
            tags=tuple(data.get("tags", ())),
            slugs=tuple(data.get("slugs", ())),
        )
