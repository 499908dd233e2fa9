"""CLI entry point for lan-media-server."""

import uvicorn

from media_server.config import HOST, get_settings


def run_server() -> None:
    """Run the LAN Media Server."""
    uvicorn.run(
        "media_server.main:app",
        host=HOST,
        port=get_settings().port,
        reload=False,
        # Logging is configured by media_server.main
        log_config=None,
    )


if __name__ == "__main__":
    run_server()
