"""
Database models for Pitico.

A single table holds every id / alias / original URL triple.
"""

from .url import UrlRecord

__all__ = ["UrlRecord"]
