"""LAN Media Server - stream local videos and pictures with HTTP range support."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lan-media-server")
except PackageNotFoundError:
    # Not installed, running from source without build
    __version__ = "0.0.0.dev0"
