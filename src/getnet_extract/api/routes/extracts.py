"""Extract endpoints: list, fetch-and-decode, and decode an uploaded body."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from getnet_extract.core.config import DatePolicy
from getnet_extract.core.exceptions import ExtractEncodingError, ExtractNotFoundError, FileStoreError
from getnet_extract.services.reader import ExtractReader

router = APIRouter(tags=["extracts"])


def _reader(request: Request) -> ExtractReader:
    return request.app.state.reader


@router.get("")
async def list_extracts(request: Request) -> dict[str, list[str]]:
    """Return the extract files available in storage."""
    try:
        return {"files": _reader(request).list_extracts()}
    except FileStoreError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.post("/decode")
async def decode_upload(request: Request, policy: DatePolicy | None = None) -> dict[str, Any]:
    """Decode an extract sent as the raw request body."""
    body = await request.body()
    try:
        decoded = _reader(request).decode_bytes(body, policy=policy)
    except ExtractEncodingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return decoded.model_dump(mode="json")


@router.get("/{file_name}")
async def get_extract(request: Request, file_name: str, policy: DatePolicy | None = None) -> dict[str, Any]:
    """Fetch an extract from storage and return its decoded records."""
    try:
        decoded = _reader(request).read(file_name, policy=policy)
    except ExtractNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ExtractEncodingError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FileStoreError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return decoded.model_dump(mode="json")
