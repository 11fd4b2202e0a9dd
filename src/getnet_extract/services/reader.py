"""ExtractReader — fetches extract files from storage and decodes them."""

from __future__ import annotations

import logging

from getnet_extract.core.config import AppSettings, DatePolicy
from getnet_extract.core.exceptions import ExtractEncodingError
from getnet_extract.core.protocols import IFileStore
from getnet_extract.models.decoded import DecodedFile
from getnet_extract.parser.dispatcher import decode_extract

logger = logging.getLogger(__name__)


class ExtractReader:
    """Reads ``<prefix><file name>`` from a file store and decodes it.

    The store is injected at construction time, so tests can pass a
    MemoryFileStore and production wiring an S3FileStore.
    """

    def __init__(
        self,
        *,
        file_store: IFileStore,
        prefix: str = "getnet/",
        encoding: str = "latin-1",
        policy: DatePolicy = "lenient",
    ) -> None:
        self._store = file_store
        self._prefix = prefix
        self._encoding = encoding
        self._policy = policy

    @classmethod
    def from_settings(cls, settings: AppSettings, file_store: IFileStore) -> ExtractReader:
        return cls(
            file_store=file_store,
            prefix=settings.s3.prefix,
            encoding=settings.decoder.encoding,
            policy=settings.decoder.date_policy,
        )

    def path_for(self, file_name: str) -> str:
        return f"{self._prefix}{file_name}"

    def decode_bytes(self, data: bytes, policy: DatePolicy | None = None) -> DecodedFile:
        """Decode raw extract bytes with the configured encoding."""
        try:
            content = data.decode(self._encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ExtractEncodingError(self._encoding, str(exc)) from exc
        return decode_extract(content, policy=policy or self._policy)

    def read(self, file_name: str, policy: DatePolicy | None = None) -> DecodedFile:
        """Fetch and decode one extract; raises ExtractNotFoundError if absent."""
        path = self.path_for(file_name)
        logger.info("Reading extract %s", path)
        decoded = self.decode_bytes(self._store.read(path), policy=policy)
        logger.info(
            "Decoded extract %s: %d records, %d issues",
            path, len(decoded.records), len(decoded.issues),
        )
        return decoded

    def list_extracts(self) -> list[str]:
        """File names (without prefix) available under the configured prefix."""
        return [
            key[len(self._prefix):]
            for key in self._store.list_files(self._prefix)
            if key != self._prefix
        ]
