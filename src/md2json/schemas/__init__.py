"""Shared schemas for md2json."""

from md2json.schemas.document import MarkdownData
from md2json.schemas.headers import Header

__all__ = ["Header", "MarkdownData"]
