"""Link list API endpoints.

Provides link trees for documents addressed by id or bookmark.
"""

import asyncio
import logging
from collections.abc import Callable

import httpx
from aiohttp import web

from linklist.app_keys import resolver_key
from linklist.core.resolver import LinkNode
from linklist.errors import (
    ContentApiError,
    CyclicReferenceError,
    DocumentNotFoundError,
    MissingOrInvalidGroupError,
)

logger = logging.getLogger(__name__)


def create_links_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/links/bookmark/{name}", get_links_by_bookmark),
        web.get("/api/links/{id}", get_links_by_id),
    ]


async def get_links_by_bookmark(request: web.Request) -> web.Response:
    name = request.match_info["name"]
    resolver = request.app[resolver_key]
    return await _respond(resolver.resolve_bookmark, name)


async def get_links_by_id(request: web.Request) -> web.Response:
    document_id = request.match_info["id"]
    resolver = request.app[resolver_key]
    return await _respond(resolver.resolve_id, document_id)


async def _respond(resolve: Callable[[str], list[LinkNode]], key: str) -> web.Response:
    try:
        nodes = await asyncio.to_thread(resolve, key)
    except DocumentNotFoundError as e:
        return web.json_response(
            {"error": "Document not found", "key": e.key, "kind": e.kind},
            status=404,
        )
    except MissingOrInvalidGroupError as e:
        return web.json_response(
            {
                "error": str(e),
                "document_id": e.document_id,
                "document_type": e.document_type,
                "fragment_name": e.fragment_name,
            },
            status=422,
        )
    except CyclicReferenceError as e:
        return web.json_response(
            {"error": str(e), "document_id": e.document_id},
            status=422,
        )
    except httpx.HTTPError as e:
        logger.error(f"Content API request failed for {key}: {e}")
        return web.json_response({"error": "Content API request failed"}, status=502)
    except ContentApiError as e:
        logger.error(f"Content API returned an unusable response for {key}: {e}")
        return web.json_response(
            {"error": "Content API returned an unusable response"},
            status=502,
        )

    return web.json_response({"items": [node.to_dict() for node in nodes]})
