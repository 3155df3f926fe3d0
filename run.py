"""Entry point for the Product Transactions API.

Serves ``transactions_api.app.main:app`` with Uvicorn.  Host and port
come from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``4005``); see ``transactions_api/app/core/config.py``
for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from transactions_api.app.core.config import settings
from transactions_api.app.main import app


async def main() -> None:
    """Run the API server until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server starting at %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
