"""Content repository integration for linklist.

This package provides the content REST API client used as a document store.
"""

from .client import ContentApiClient, create_content_api_client

__all__ = ["ContentApiClient", "create_content_api_client"]
