"""Integration tests for S3FileStore + ExtractReader against LocalStack."""

from __future__ import annotations

import pytest

from getnet_extract.persistence.s3_backend import S3FileStore
from getnet_extract.services.reader import ExtractReader
from tests.integration.conftest import LOCALSTACK_URL, skip_no_localstack
from tests.samples import SAMPLE_EXTRACT


@skip_no_localstack
class TestS3ExtractIntegration:
    @pytest.fixture
    def store(self, extract_bucket):
        return S3FileStore(bucket=extract_bucket, region="us-east-1", endpoint_url=LOCALSTACK_URL)

    def test_reads_and_decodes_uploaded_extract(self, store):
        store.write("getnet/EXTRATO_INT.txt", SAMPLE_EXTRACT.encode("latin-1"))
        decoded = ExtractReader(file_store=store).read("EXTRATO_INT.txt")
        assert [r["TipoRegistro"] for r in decoded.records] == [0, 1, 2, 3, 4, 5, 6, 9]

    def test_lists_uploaded_extract(self, store):
        store.write("getnet/EXTRATO_LIST.txt", b"9000000000")
        assert "EXTRATO_LIST.txt" in ExtractReader(file_store=store).list_extracts()
