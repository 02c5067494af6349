"""Application keys for type-safe app configuration access."""

from aiohttp import web

from linklist.core.resolver import LinkListResolver

resolver_key = web.AppKey("resolver", LinkListResolver)
