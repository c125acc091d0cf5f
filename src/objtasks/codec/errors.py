"""Codec error types."""

from __future__ import annotations


class CodecError(Exception):
    """Base error for serialization and deserialization failures."""


class ParseError(CodecError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SerializeError(CodecError):
    """Raised when a value has no JSON representation."""


class TemplateError(CodecError):
    """Raised when parsed data cannot be turned into the template type."""
