"""Commit message generator for selected working-tree changes."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
