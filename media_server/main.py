"""ASGI entry point for LAN Media Server."""

import locale
import logging

# Setup logging before any other imports
# ruff: noqa: E402 (imports after logging setup is intentional)
from media_server.config import HOST, get_settings
from media_server.utils.logging import setup_logging

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

from media_server.app import create_app

logger = logging.getLogger(__name__)

# Listing order follows the host's collation rules
try:
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error as e:
    logger.warning(f"Cannot apply host collation locale, sorting with C rules: {e}")

app = create_app(settings)
logger.info(f"Media server running at http://{HOST}:{settings.port}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=settings.port, log_config=None)
