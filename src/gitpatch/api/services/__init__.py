"""Service layer for the gitpatch API."""

from .parse import ParseService

__all__ = ["ParseService"]
