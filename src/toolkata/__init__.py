"""toolkata: tool-comparison catalog and command reference."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("toolkata")
except PackageNotFoundError:
    __version__ = "dev"
