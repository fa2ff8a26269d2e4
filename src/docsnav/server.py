"""aiohttp server for docsnav.

Application factory and route registration.
"""

import logging

from aiohttp import web

from docsnav.api.docs import create_docs_routes
from docsnav.api.navigation import create_navigation_routes
from docsnav.app_keys import library_key
from docsnav.config import Config
from docsnav.core.library import DocsLibrary

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        DocsDirectoryNotFoundError: If the docs source directory doesn't exist
    """
    source_dir = config.resolve_source_dir()
    logger.info(f"Serving documents from {source_dir}")

    app = web.Application()
    app[library_key] = DocsLibrary(source_dir, config.docs.extensions)

    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_docs_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
