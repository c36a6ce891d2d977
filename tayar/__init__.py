"""
Tayar News Backend

A FastAPI backend for the Tayar developer-news reader.
Provides feed ingestion, enriched article feeds and reader engagement
(bookmarks, reading history, reactions, comments).
"""

__version__ = "1.0.0"
