"""Service layer exports."""

from . import sg_cache  # noqa: F401

__all__ = ["sg_cache"]
