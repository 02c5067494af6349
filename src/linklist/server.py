"""aiohttp server for linklist.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from linklist.api.links import create_links_routes
from linklist.app_keys import resolver_key
from linklist.config import Config
from linklist.core.resolver import LinkListResolver
from linklist.factory import create_resolver


def create_app(config: Config, *, resolver: LinkListResolver | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        resolver: Resolver to serve instead of one built from config

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[resolver_key] = resolver if resolver is not None else create_resolver(config)
    app.router.add_routes(create_links_routes())
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
