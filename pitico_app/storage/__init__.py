"""
Durable storage of id / alias / original URL mappings.
"""

from .mapping_store import MappingStore

__all__ = ["MappingStore"]
