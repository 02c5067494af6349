"""Content fragments attached to document fields.

Only the capabilities needed to build link trees are modelled: whether a
fragment is a link, and how it renders as plain text. Fragment kinds the
resolver does not understand are kept as opaque values.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypedDict

TEXT_KINDS = frozenset({"Text", "Select", "Color", "Number", "Date", "Timestamp"})


class FragmentDict(TypedDict):
    """Fragment as returned by the content API."""

    type: str
    value: Any


class Fragment:
    """Base class for all fragment variants."""

    is_link: ClassVar[bool] = False

    def as_text(self) -> str:
        """Render the fragment as plain text."""
        return ""


class LinkFragment(Fragment):
    """Base class for fragments that point somewhere."""

    is_link: ClassVar[bool] = True


@dataclass(frozen=True)
class DocumentLink(LinkFragment):
    """Link to another document in the repository."""

    id: str
    type: str
    uid: str | None = None
    slug: str | None = None
    lang: str | None = None
    tags: tuple[str, ...] = ()
    is_broken: bool = False

    def as_text(self) -> str:
        return self.id


@dataclass(frozen=True)
class WebLink(LinkFragment):
    """Link to an external URL."""

    url: str
    target: str | None = None

    def as_text(self) -> str:
        return self.url


@dataclass(frozen=True)
class MediaLink(LinkFragment):
    """Link to a file or image in the media library."""

    url: str
    kind: str = "file"
    name: str | None = None
    size: int | None = None

    def as_text(self) -> str:
        return self.url


@dataclass(frozen=True)
class TextFragment(Fragment):
    """Scalar value rendered verbatim (text, select, color, number, date)."""

    value: str

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class StructuredTextFragment(Fragment):
    """Rich text; only the text of each block is kept."""

    blocks: tuple[str, ...] = ()

    def as_text(self) -> str:
        return "\n".join(self.blocks)


@dataclass(frozen=True)
class GroupFragment(Fragment):
    """Ordered sequence of records, each mapping field names to fragments."""

    records: tuple[Mapping[str, Fragment], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OpaqueFragment(Fragment):
    """Fragment kind with no plain-text rendering."""

    kind: str
    value: Any = None


def parse_fragment(data: FragmentDict) -> Fragment:
    """Build a fragment from its API representation.

    Args:
        data: Fragment dictionary with ``type`` and ``value`` keys

    Returns:
        Matching fragment variant, OpaqueFragment for unknown kinds

    Raises:
        ValueError: If data is not a fragment dictionary
    """
    if not isinstance(data, dict) or not isinstance(data.get("type"), str):
        raise ValueError(f"Invalid fragment: {data!r}")

    kind = data["type"]
    value = data.get("value")
    if kind in TEXT_KINDS:
        return TextFragment("" if value is None else str(value))

    parser = _PARSERS.get(kind)
    if parser is None:
        return OpaqueFragment(kind=kind, value=value)
    return parser(value)


def parse_record(data: Mapping[str, FragmentDict]) -> dict[str, Fragment]:
    """Parse one group record, keeping field order."""
    return {name: parse_fragment(fragment) for name, fragment in data.items()}


def _parse_document_link(value: dict[str, Any]) -> DocumentLink:
    document = value["document"]
    return DocumentLink(
        id=document["id"],
        type=document["type"],
        uid=document.get("uid"),
        slug=document.get("slug"),
        lang=document.get("lang"),
        tags=tuple(document.get("tags", ())),
        is_broken=bool(value.get("isBroken", False)),
    )


def _parse_web_link(value: dict[str, Any]) -> WebLink:
    return WebLink(url=value["url"], target=value.get("target"))


def _parse_media_link(key: str) -> Callable[[dict[str, Any]], MediaLink]:
    def parse(value: dict[str, Any]) -> MediaLink:
        media = value[key]
        return MediaLink(
            url=media["url"],
            kind=media.get("kind", key),
            name=media.get("name"),
            size=int(media["size"]) if media.get("size") is not None else None,
        )

    return parse


def _parse_structured_text(value: list[dict[str, Any]]) -> StructuredTextFragment:
    return StructuredTextFragment(
        blocks=tuple(block["text"] for block in value if "text" in block),
    )


def _parse_group(value: list[dict[str, FragmentDict]]) -> GroupFragment:
    return GroupFragment(records=tuple(parse_record(record) for record in value))


_PARSERS: dict[str, Callable[[Any], Fragment]] = {
    "Link.document": _parse_document_link,
    "Link.web": _parse_web_link,
    "Link.file": _parse_media_link("file"),
    "Link.image": _parse_media_link("image"),
    "StructuredText": _parse_structured_text,
    "Group": _parse_group,
}
