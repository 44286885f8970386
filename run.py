"""Entry point for the Movie Chat API.

Starts the FastAPI application with uvicorn.  Bind address and port
come from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8081``); see ``movie_chat_api/app/core/config.py``
for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from movie_chat_api.app.core.config import settings
from movie_chat_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
