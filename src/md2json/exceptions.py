"""Custom exceptions for md2json."""


class Md2jsonError(Exception):
    """Base exception for md2json operations."""


class ParseError(Md2jsonError):
    """Error raised by the Markdown engine while parsing or rendering."""


class OutputError(Md2jsonError):
    """Error while writing or removing a JSON artifact."""


class InputError(Md2jsonError):
    """Error while reading a Markdown source file."""
