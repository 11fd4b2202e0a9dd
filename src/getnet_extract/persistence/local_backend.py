"""Local filesystem backend implementing IFileStore."""

from __future__ import annotations

from pathlib import Path

from getnet_extract.core.exceptions import ExtractNotFoundError, FileStoreError


class LocalFileStore:
    """IFileStore rooted at a local directory; paths are relative to it."""

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    def read(self, path: str) -> bytes:
        target = self._root / path
        try:
            return target.read_bytes()
        except FileNotFoundError as exc:
            raise ExtractNotFoundError(path) from exc
        except OSError as exc:
            raise FileStoreError(f"Local read failed for {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes, content_type: str = "text/plain") -> str:
        target = self._root / path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise FileStoreError(f"Local write failed for {path!r}: {exc}") from exc
        return path

    def list_files(self, prefix: str) -> list[str]:
        return sorted(
            p.relative_to(self._root).as_posix()
            for p in self._root.rglob("*")
            if p.is_file() and p.relative_to(self._root).as_posix().startswith(prefix)
        )
