"""Base error definitions for hashbrown packages."""

from typing import Any, Dict


class HashbrownError(Exception):
    """Base exception for all hashbrown errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class FileProcessingError(HashbrownError):
    """Base exception for errors raised while reading a file."""
    pass
