"""HTTP API for pickdiff."""

from .. import __version__

__all__ = ["__version__"]
