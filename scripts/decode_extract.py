"""Decode a Getnet extract file and print the records as JSON.

Usage:
    python scripts/decode_extract.py extrato.txt
    python scripts/decode_extract.py extrato.txt --s3 --bucket getnet-extracts --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from getnet_extract.core.config import AppSettings
from getnet_extract.core.exceptions import GetnetExtractError
from getnet_extract.core.logging_setup import configure_logging
from getnet_extract.core.protocols import IFileStore
from getnet_extract.persistence.local_backend import LocalFileStore
from getnet_extract.persistence.s3_backend import S3FileStore
from getnet_extract.services.reader import ExtractReader


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode a Getnet Extrato Eletrônico file")
    parser.add_argument("file", help="Local path, or file name under --prefix with --s3")
    parser.add_argument("--s3", action="store_true", help="Read the file from S3 instead of disk")
    parser.add_argument("--bucket", default=settings.s3.bucket, help="S3 bucket")
    parser.add_argument("--prefix", default=settings.s3.prefix, help="S3 key prefix (e.g. getnet/)")
    parser.add_argument("--region", default=settings.s3.region, help="AWS region")
    parser.add_argument("--endpoint-url", default=settings.s3.endpoint_url,
                        help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--policy", choices=["lenient", "strict"], default=settings.decoder.date_policy,
                        help="What to do with records holding invalid dates/times")
    parser.add_argument("--encoding", default=settings.decoder.encoding, help="File encoding")
    return parser


def run(argv: list[str] | None = None, settings: AppSettings | None = None) -> dict[str, Any]:
    """Parse arguments, decode the requested extract and return it JSON-ready."""
    if settings is None:
        settings = AppSettings()
    args = build_parser(settings).parse_args(argv)

    store: IFileStore
    if args.s3:
        store = S3FileStore(bucket=args.bucket, region=args.region, endpoint_url=args.endpoint_url)
        prefix, name = args.prefix, args.file
    else:
        path = Path(args.file)
        store = LocalFileStore(path.parent)
        prefix, name = "", path.name

    reader = ExtractReader(file_store=store, prefix=prefix, encoding=args.encoding, policy=args.policy)
    return reader.read(name).model_dump(mode="json")


def main() -> None:
    settings = AppSettings()
    configure_logging(settings)
    try:
        output = run(settings=settings)
    except GetnetExtractError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
