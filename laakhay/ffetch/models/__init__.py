"""Data models.

Architecture:
    Pydantic v2 models validate the JSON envelope of each page. Entries
    themselves stay plain dictionaries of JSON values so that transforms can
    work with them directly.
"""

from .page import PageResponse, Record

__all__ = ["PageResponse", "Record"]
