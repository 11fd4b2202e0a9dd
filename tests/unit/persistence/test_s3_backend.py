"""Unit tests for S3FileStore using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from getnet_extract.core.exceptions import ExtractNotFoundError, FileStoreError
from getnet_extract.core.protocols import IFileStore
from getnet_extract.persistence.s3_backend import S3FileStore

BUCKET = "test-getnet-extracts"


@pytest.fixture
def s3_backend():
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket=BUCKET)
        yield S3FileStore(bucket=BUCKET, region="us-east-1")


class TestProtocol:
    def test_satisfies_file_store_protocol(self, s3_backend):
        assert isinstance(s3_backend, IFileStore)


class TestWrite:
    def test_write_returns_path(self, s3_backend):
        result = s3_backend.write("getnet/extrato.txt", b"9000000001")
        assert result == "getnet/extrato.txt"

    def test_write_stores_bytes(self, s3_backend):
        s3_backend.write("getnet/latin.txt", "Cessão".encode("latin-1"))
        assert s3_backend.read("getnet/latin.txt") == "Cessão".encode("latin-1")


class TestRead:
    def test_read_returns_bytes(self, s3_backend):
        s3_backend.write("getnet/hello.txt", b"Hello")
        assert s3_backend.read("getnet/hello.txt") == b"Hello"

    def test_read_missing_key_raises_not_found(self, s3_backend):
        with pytest.raises(ExtractNotFoundError) as exc_info:
            s3_backend.read("getnet/missing.txt")
        assert exc_info.value.path == "getnet/missing.txt"

    def test_missing_bucket_raises_store_error(self):
        with mock_aws():
            store = S3FileStore(bucket="no-such-bucket", region="us-east-1")
            with pytest.raises(FileStoreError):
                store.read("getnet/extrato.txt")


class TestListFiles:
    def test_list_returns_matching_keys(self, s3_backend):
        s3_backend.write("getnet/a.txt", b"1")
        s3_backend.write("getnet/b.txt", b"2")
        s3_backend.write("other/c.txt", b"3")
        result = s3_backend.list_files("getnet/")
        assert sorted(result) == ["getnet/a.txt", "getnet/b.txt"]

    def test_list_empty_prefix_returns_nothing(self, s3_backend):
        assert s3_backend.list_files("nonexistent/") == []

    def test_list_handles_pagination(self, s3_backend):
        for i in range(1050):
            s3_backend.write(f"bulk/{i:04d}.txt", b"x")
        assert len(s3_backend.list_files("bulk/")) == 1050
