"""Launch the Catalog API with Uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``); see
``catalog_api.app.core.config`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from catalog_api.app.core.config import settings
from catalog_api.app.main import app


async def main() -> None:
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
