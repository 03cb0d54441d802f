"""
Cache boundary modules.

Exports: CacheProvider, ArrayCache, ChainCache
"""

from .providers import ArrayCache, CacheProvider, ChainCache

__all__ = ["ArrayCache", "CacheProvider", "ChainCache"]
