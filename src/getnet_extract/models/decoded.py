"""Decoded extract models: the per-file result and its per-field issues."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DecodeIssue(BaseModel):
    """A date/time field that failed calendar or clock validation."""

    line_number: int  # 1-based, counted over every physical line
    record_type: int
    field: str
    raw: str
    message: str
    record_dropped: bool = False  # True under the strict date policy


class DecodedFile(BaseModel):
    """Records of one extract in input order, plus any decode issues."""

    records: list[dict[str, Any]] = Field(default_factory=list)
    issues: list[DecodeIssue] = Field(default_factory=list)

    def records_of(self, record_type: int) -> list[dict[str, Any]]:
        """Records whose TipoRegistro equals ``record_type``."""
        return [r for r in self.records if r.get("TipoRegistro") == record_type]

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)
