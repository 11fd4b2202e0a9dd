"""In-memory file store for unit tests — dict-backed fake."""

from __future__ import annotations

from getnet_extract.core.exceptions import ExtractNotFoundError


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise ExtractNotFoundError(path) from exc

    def write(self, path: str, data: bytes, content_type: str = "text/plain") -> str:
        self._files[path] = data
        return path

    def list_files(self, prefix: str) -> list[str]:
        return [k for k in self._files if k.startswith(prefix)]
