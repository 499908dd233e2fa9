"""Utility functions for LAN Media Server."""

from media_server.utils.logging import setup_logging

__all__ = ["setup_logging"]
