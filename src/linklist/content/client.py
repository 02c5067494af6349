"""Content API client for linklist.

This module provides an HTTP client for a Prismic-style content REST API.
Supports reading bookmarks and fetching documents by id.
"""

import logging
import re
import time
from typing import Any, NotRequired, TypedDict

import httpx

from linklist.config import ApiConfig
from linklist.core.document import Document, DocumentDict
from linklist.errors import ContentApiError

logger = logging.getLogger(__name__)

# Repository document ids are alphanumeric with dashes and underscores
DOCUMENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


# Content API Response TypedDicts


class RefDict(TypedDict):
    """Content release reference."""

    id: str
    ref: str
    label: NotRequired[str]
    isMasterRef: NotRequired[bool]


class ApiDataDict(TypedDict):
    """Repository metadata returned by the API entry point."""

    refs: list[RefDict]
    bookmarks: dict[str, str]
    types: NotRequired[dict[str, str]]


class SearchResponseDict(TypedDict):
    """Document search response."""

    page: int
    results_per_page: int
    total_results_size: int
    results: list[DocumentDict]


class ContentApiClient:
    """HTTP client for the content REST API.

    Implements the DocumentStore protocol so it can back a LinkListResolver.
    Repository metadata (refs and bookmarks) is reused for ref_ttl seconds,
    so newly published releases are picked up without a restart.
    """

    def __init__(
        self,
        client: httpx.Client,
        endpoint: str,
        access_token: str | None = None,
        ref_ttl: float = 5.0,
    ):
        """Initialize content API client.

        Args:
            client: httpx Client used for all requests
            endpoint: API entry point (e.g., https://repo.cdn.prismic.io/api/v1)
            access_token: Optional access token for private repositories
            ref_ttl: Seconds to reuse repository metadata, 0 to fetch every time
        """
        self.client = client
        self.endpoint = endpoint.rstrip("/")
        self.access_token = access_token
        self.ref_ttl = ref_ttl
        self._api_data: ApiDataDict | None = None
        self._api_data_fetched_at = 0.0

    def get_api_data(self) -> ApiDataDict:
        """Get repository metadata.

        Returns:
            Refs and bookmarks of the repository

        Raises:
            httpx.HTTPError: If request fails
            ContentApiError: If the response is not repository metadata
        """
        if (
            self._api_data is not None
            and time.monotonic() - self._api_data_fetched_at < self.ref_ttl
        ):
            return self._api_data

        logger.info(f"Fetching API data from {self.endpoint}")
        response = self.client.get(self.endpoint, params=self._params())
        if response.status_code >= 400:
            logger.error(f"Error response: {response.text}")
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict) or not isinstance(data.get("refs"), list):
            raise ContentApiError(f"Unexpected API data from {self.endpoint}")
        data.setdefault("bookmarks", {})
        self._api_data = data
        self._api_data_fetched_at = time.monotonic()
        return data

    @property
    def master_ref(self) -> str:
        """Reference of the published content release.

        Raises:
            ContentApiError: If the repository exposes no master ref
        """
        for ref in self.get_api_data()["refs"]:
            if ref.get("isMasterRef"):
                return ref["ref"]
        raise ContentApiError(f"No master ref found at {self.endpoint}")

    def get_bookmark(self, name: str) -> str | None:
        """Get the document id registered under a bookmark.

        Args:
            name: Bookmark name

        Returns:
            Document id if the bookmark exists, None otherwise
        """
        return self.get_api_data()["bookmarks"].get(name)

    def get_by_id(self, document_id: str) -> Document | None:
        """Get a document by id.

        Args:
            document_id: Document ID

        Returns:
            Document if found, None otherwise (also for malformed ids)

        Raises:
            httpx.HTTPError: If request fails
            ContentApiError: If the response cannot be parsed
        """
        if not DOCUMENT_ID_PATTERN.match(document_id):
            logger.warning(f"Rejecting malformed document id {document_id!r}")
            return None

        params = self._params(
            ref=self.master_ref,
            q=f'[[:d = at(document.id, "{document_id}")]]',
            pageSize="1",
        )

        logger.info(f"Getting document {document_id}")
        response = self.client.get(f"{self.endpoint}/documents/search", params=params)
        if response.status_code >= 400:
            logger.error(f"Error response: {response.text}")
        response.raise_for_status()

        data: SearchResponseDict = response.json()
        results = data.get("results")
        if not isinstance(results, list):
            raise ContentApiError(f"Unexpected search response for document {document_id}")
        if not results:
            logger.info(f"Document {document_id} not found")
            return None

        try:
            return Document.from_dict(results[0])
        except (KeyError, TypeError, ValueError) as e:
            raise ContentApiError(f"Invalid document {document_id}: {e}") from e

    def _params(self, **params: str) -> dict[str, Any]:
        if self.access_token:
            params["access_token"] = self.access_token
        return params


def create_content_api_client(config: ApiConfig) -> ContentApiClient:
    """Create content API client from configuration.

    Args:
        config: API configuration with endpoint set

    Returns:
        ContentApiClient wrapping a new httpx Client

    Raises:
        ValueError: If no endpoint is configured
    """
    if not config.endpoint:
        raise ValueError("api.endpoint is required to fetch documents")
    client = httpx.Client(
        timeout=config.timeout,
        headers={"Accept": "application/json"},
    )
    return ContentApiClient(
        client,
        config.endpoint,
        config.access_token,
        ref_ttl=config.ref_ttl,
    )
