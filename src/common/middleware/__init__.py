"""Common middleware for meetapp."""

from .observability import StructlogContextMiddleware

__all__ = ["StructlogContextMiddleware"]
