"""Application services shared by user interfaces."""

from .warm_service import WarmCacheService, WarmRequest

__all__ = ["WarmCacheService", "WarmRequest"]
