"""Getnet extract exception hierarchy."""

from __future__ import annotations


class GetnetExtractError(Exception):
    """Base exception for all extract errors."""


class DecodeError(GetnetExtractError):
    """A field could not be decoded."""

    def __init__(self, raw: str, message: str) -> None:
        self.raw = raw
        super().__init__(message)


class MalformedDateError(DecodeError):
    """An 8-character field is not a valid ddMMyyyy calendar date."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw, f"Invalid ddMMyyyy date: {raw!r}")


class MalformedTimeError(DecodeError):
    """A 6-character field is not a valid HHmmss clock time."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw, f"Invalid HHmmss time: {raw!r}")


class FileStoreError(GetnetExtractError):
    """Extract storage operation failed."""


class ExtractNotFoundError(FileStoreError):
    """Requested extract file does not exist in the store."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Extract not found: {path!r}")


class ExtractEncodingError(GetnetExtractError):
    """Extract bytes cannot be decoded with the configured encoding."""

    def __init__(self, encoding: str, message: str) -> None:
        self.encoding = encoding
        super().__init__(f"Cannot decode extract as {encoding!r}: {message}")
