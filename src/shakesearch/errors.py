"""Exceptions raised while loading the search sources."""

from __future__ import annotations


class LoadError(Exception):
    """
    Raised when a source file cannot be read or is structurally invalid.

    Loading happens once at startup, so a LoadError is fatal: the service
    must not start with a partially loaded index.

    Attributes:
        message: Human-readable error description.
        path: The offending file, when known.
        row: 1-based row number for tabular sources, when known.
    """

    def __init__(self, message: str, *, path: str | None = None, row: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.row = row

    def __str__(self) -> str:
        where = ""
        if self.path:
            where = f" ({self.path}"
            where += f", row {self.row})" if self.row is not None else ")"
        elif self.row is not None:
            where = f" (row {self.row})"
        return f"{self.message}{where}"
