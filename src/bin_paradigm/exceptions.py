"""Custom exception hierarchy for bin-paradigm."""

from __future__ import annotations


class ParadigmError(Exception):
    """Base exception for all bin-paradigm errors."""


class DataLoadError(ParadigmError):
    """Malformed dataset record (wrong column count, non-numeric id)."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ParseError(ParadigmError):
    """Error parsing a query request file."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        super().__init__(message)
