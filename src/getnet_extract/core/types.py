"""Type aliases used across the extract decoder."""

from __future__ import annotations

from typing import Any

Record = dict[str, Any]
RecordTag = str
