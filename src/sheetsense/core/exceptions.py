"""Exceptions raised at the loading boundary.

Analysis functions never raise for bad data; they return ``Result.fail``.
These exceptions cover input that cannot become a valid table at all.
"""

from __future__ import annotations


class SheetsenseError(Exception):
    """Base exception for all sheetsense errors."""


class TableStructureError(SheetsenseError):
    """Raised when headers or rows do not form a valid table."""

    def __init__(self, message: str, row_index: int | None = None):
        super().__init__(message)
        self.message = message
        self.row_index = row_index


class SourceLoadError(SheetsenseError):
    """Raised when a source file cannot be read into a table."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
