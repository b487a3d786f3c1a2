"""
Database models for the URL shortener.
"""

from .url import URL

__all__ = ["URL"]
