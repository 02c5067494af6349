"""Wiring of configured resolvers."""

import logging

from linklist.config import Config
from linklist.content import create_content_api_client
from linklist.core.href import DefaultHrefResolver
from linklist.core.resolver import LinkListResolver
from linklist.core.store import DocumentStore, InMemoryDocumentStore

logger = logging.getLogger(__name__)


def create_store(config: Config) -> DocumentStore:
    """Create the document store described by the configuration.

    A fixtures directory takes precedence over the content API.

    Raises:
        ValueError: If neither fixtures nor an API endpoint are configured
    """
    if config.fixtures.directory is not None:
        logger.info(f"Using fixtures from {config.fixtures.directory}")
        return InMemoryDocumentStore.from_directory(config.fixtures.directory)
    return create_content_api_client(config.api)


def create_resolver(config: Config, store: DocumentStore | None = None) -> LinkListResolver:
    """Create a resolver from configuration.

    Args:
        config: Application configuration
        store: Document store to use instead of the configured one

    Returns:
        Configured LinkListResolver
    """
    return LinkListResolver(
        store if store is not None else create_store(config),
        DefaultHrefResolver(config.href.document_pattern),
        document_type=config.link_list.document_type,
        fragment_name=config.link_list.fragment_name,
    )
