"""HTTP API for gitpatch."""

from .. import __version__

__all__ = ["__version__"]
