"""
aiohttp application factory.
"""

import logging

from aiohttp import web

from adapters.web.handlers import routes
from adapters.web.loader import Container
from adapters.web.middleware import (
    auth_middleware,
    error_middleware,
    language_middleware,
    request_log_middleware,
)
from adapters.web.stats import routes as stats_routes
from adapters.web.utils import CONTAINER_KEY

logger = logging.getLogger(__name__)


def create_app(container: Container) -> web.Application:
    """Create the web app. Realtime is started by the caller, not here."""
    middlewares = [language_middleware, error_middleware, auth_middleware]
    if container.features.LOG_REQUESTS:
        middlewares.insert(0, request_log_middleware)

    app = web.Application(middlewares=middlewares)
    app[CONTAINER_KEY] = container

    for table in routes:
        app.router.add_routes(table)
    app.router.add_routes(stats_routes)

    async def on_cleanup(app: web.Application):
        if container.listener:
            await container.listener.stop()

    app.on_cleanup.append(on_cleanup)
    logger.info(f"Web app created ({len(app.router.routes())} routes)")
    return app
