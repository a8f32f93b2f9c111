"""
Community site backend - Main entry point.

Serves the public content API and the admin dashboard API over Supabase,
and keeps cached public content in sync through Supabase Realtime.
"""

import asyncio
import logging
import secrets
import sys
from aiohttp import web

from adapters.web import build_container, create_app
from config.features import features
from config.settings import settings
from infrastructure.database.supabase_client import SupabaseNotConfigured

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("site.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
    # Silence noisy HTTP debug logs
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('hpack').setLevel(logging.WARNING)

# Retry settings
MAX_RETRIES = 5
RETRY_DELAY = 10  # seconds


async def run_web_server(app: web.Application) -> web.AppRunner:
    """Bind the API, retrying while the port is still held by a previous instance."""
    runner = web.AppRunner(app)
    await runner.setup()

    retries = 0
    while True:
        try:
            site = web.TCPSite(runner, settings.host, settings.port)
            await site.start()
            break
        except OSError as e:
            retries += 1
            if retries >= MAX_RETRIES:
                logger.error(f"Could not bind {settings.host}:{settings.port}: {e}")
                await runner.cleanup()
                raise
            logger.warning(
                f"Port {settings.port} busy. "
                f"Retry {retries}/{MAX_RETRIES} in {RETRY_DELAY}s..."
            )
            await asyncio.sleep(RETRY_DELAY)

    logger.info(f"Web API running on {settings.host}:{settings.port}")
    logger.info(f"Stats dashboard: /stats?token={settings.stats_token}")
    return runner


async def start_realtime(listener) -> bool:
    """Subscribe to content changes. The site still works (TTL only) if this fails."""
    retries = 0
    while retries < MAX_RETRIES:
        try:
            await listener.start()
            logger.info("Realtime listener started (cache invalidation on content changes)")
            return True
        except Exception as e:
            retries += 1
            logger.error(f"Realtime subscribe failed: {e}")
            await listener.stop()
            if retries < MAX_RETRIES:
                logger.info(f"Retrying in {RETRY_DELAY}s... ({retries}/{MAX_RETRIES})")
                await asyncio.sleep(RETRY_DELAY)
    logger.warning("Realtime disabled for this run; cached content expires by TTL only")
    return False


async def main():
    """Main function - starts the API with graceful error handling."""

    # Log feature status
    logger.info("=== Community Site Starting ===")
    logger.info(f"Environment: {settings.env} (schema={settings.db_schema})")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    if not settings.is_configured:
        logger.error("SUPABASE_URL and SUPABASE_SERVICE_KEY (or SUPABASE_KEY) are required. Check your .env")
        sys.exit(1)

    if not settings.stats_token:
        settings.stats_token = secrets.token_urlsafe(16)

    container = build_container(settings, features)
    app = create_app(container)
    runner = await run_web_server(app)

    if container.listener:
        await start_realtime(container.listener)

    logger.info("Community site started!")

    try:
        # Serve until cancelled (Ctrl+C / SIGTERM)
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        logger.info("Web server stopped.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Site stopped by user (Ctrl+C)")
    except SupabaseNotConfigured as e:
        logger.error(str(e))
        sys.exit(1)
    except SystemExit as e:
        sys.exit(e.code)
