"""md2json: convert Markdown documents into HTML, a heading tree and metadata."""

from md2json.exceptions import InputError, Md2jsonError, OutputError, ParseError
from md2json.languages import UNKNOWN_LANGUAGE, normalize_language
from md2json.parser import build_markdown_engine, create_json, prepare_markdown_data
from md2json.schemas import Header, MarkdownData

__all__ = [
    "Header",
    "InputError",
    "MarkdownData",
    "Md2jsonError",
    "OutputError",
    "ParseError",
    "UNKNOWN_LANGUAGE",
    "build_markdown_engine",
    "create_json",
    "normalize_language",
    "prepare_markdown_data",
]
