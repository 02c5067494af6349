"""Error types raised while resolving link lists."""


class LinkListError(RuntimeError):
    """Base class for link list resolution failures."""


class DocumentNotFoundError(LinkListError):
    """No document exists for a bookmark or document id."""

    def __init__(self, key: str, kind: str = "id") -> None:
        self.key = key
        self.kind = kind
        super().__init__(f"There is no document with the {kind} {key}")


class MissingOrInvalidGroupError(LinkListError):
    """The configured fragment is absent or is not a group."""

    def __init__(self, document_id: str, document_type: str, fragment_name: str) -> None:
        self.document_id = document_id
        self.document_type = document_type
        self.fragment_name = fragment_name
        super().__init__(
            f"The given document with id {document_id} and type {document_type} "
            f"does not contain a fragment with the name {fragment_name}, "
            "or, the fragment is not a group"
        )


class CyclicReferenceError(LinkListError):
    """A link list links back to one of its own ancestors."""

    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__(
            f"Infinite recursion detected for the link list with ID {document_id}"
        )


class ContentApiError(LinkListError):
    """The content API returned a payload that cannot be used."""
