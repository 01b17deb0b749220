"""
Pitico: a very simple URL shortener.
"""

__version__ = "1.0.0"
