"""Fixed-width record layouts and the tag -> layout dispatch table."""

from __future__ import annotations

from getnet_extract.layouts.records import (
    DISPATCH_TABLE,
    LAYOUTS,
    FieldSpec,
    LayoutResult,
    RecordLayout,
    RecordType,
)

__all__ = ["DISPATCH_TABLE", "LAYOUTS", "FieldSpec", "LayoutResult", "RecordLayout", "RecordType"]
