"""Service layer for the pickdiff API."""

from .diff import DiffService

__all__ = ["DiffService"]
