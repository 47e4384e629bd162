import logging
import os

import uvicorn
from dotenv import load_dotenv

from infrastructure.logging_setup import setup_logging

load_dotenv()

logger = logging.getLogger(__name__)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port_str = os.getenv("PORT", "8000")
    try:
        port = int(port_str)
    except ValueError:
        raise SystemExit(f"PORT must be an integer, got {port_str!r}")
    reload = _as_bool(os.getenv("RELOAD", "true"))
    log_level = os.getenv("LOG_LEVEL", "info")

    setup_logging(log_level)
    logger.info(
        f"Starting server at http://{host}:{port} "
        f"(Reload: {reload}, ORM: {os.getenv('ORM', 'peewee')})"
    )

    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run()
