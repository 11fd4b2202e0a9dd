"""Primitive field converters for fixed-width extract lines.

Every converter takes the raw slice of a line and is total over it, with two
exceptions: ``to_date`` and ``to_time`` raise ``MalformedDateError`` /
``MalformedTimeError`` when a field passes the blank, zero and length gates
but is not a real calendar date or clock time.

Numeric leniency: a field that does not start with a number decodes to
``NUMERIC_FALLBACK`` instead of failing. Only the leading numeric prefix of a
field is read, so ``"12AB"`` is ``12`` and ``"AB12"`` is ``0``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Mapping

from getnet_extract.codec.lookups import (
    ACCOUNT_TYPES,
    BRL_ISO_NUMERIC,
    FINANCIAL_INSTITUTION,
    NON_FINANCIAL_INSTITUTION,
    OPERATION_TYPES,
    PAYMENT_TYPES,
    UNDEFINED_LABEL,
)
from getnet_extract.core.exceptions import MalformedDateError, MalformedTimeError

NUMERIC_FALLBACK = 0
CURRENCY_SCALE = Decimal("100")
CENTS = Decimal("0.01")

DATE_LENGTH = 8
TIME_LENGTH = 6

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_DECIMAL_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def extract_slice(line: str, offset: int, length: int) -> str:
    """Return ``length`` characters at ``offset``; short lines give a short or empty string."""
    return line[offset:offset + length]


def to_integer(raw: str) -> int:
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return NUMERIC_FALLBACK
    return int(match.group(1))


def to_currency(raw: str) -> Decimal:
    """Read an amount with two implied decimal places (``"000012345"`` -> ``123.45``)."""
    match = _DECIMAL_PREFIX.match(raw)
    if match is None:
        return Decimal(NUMERIC_FALLBACK).quantize(CENTS)
    return (Decimal(match.group(1)) / CURRENCY_SCALE).quantize(CENTS)


def to_trimmed_string(raw: str) -> str:
    return raw.strip()


def to_raw_string(raw: str) -> str:
    return raw


def to_optional_raw(raw: str) -> str | None:
    """Blank fields become ``None``; anything else is passed through untouched."""
    return None if raw.strip() == "" else raw


def _is_null_temporal(raw: str, expected_length: int) -> bool:
    # Order matters: blank, then numerically zero, then wrong length.
    if raw.strip() == "":
        return True
    if to_integer(raw) == 0:
        return True
    if len(raw) != expected_length:
        return True
    # Not numeric-looking (e.g. "1/1/2023"): nothing to validate.
    return not (raw.isascii() and raw.isdigit())


def to_date(raw: str) -> date | None:
    """Parse ``ddMMyyyy``; blank, zero, non-numeric or non 8-character fields give ``None``."""
    if _is_null_temporal(raw, DATE_LENGTH):
        return None
    try:
        return datetime.strptime(raw, "%d%m%Y").date()
    except ValueError as exc:
        raise MalformedDateError(raw) from exc


def to_time(raw: str) -> time | None:
    """Parse ``HHmmss``; blank, zero, non-numeric or non 6-character fields give ``None``."""
    if _is_null_temporal(raw, TIME_LENGTH):
        return None
    try:
        return datetime.strptime(raw, "%H%M%S").time()
    except ValueError as exc:
        raise MalformedTimeError(raw) from exc


def map_code(raw: str, table: Mapping[str, str]) -> str:
    return table.get(raw, UNDEFINED_LABEL)


def currency_code(raw: str) -> str:
    """``"986"`` is BRL; every other value is reported as USD."""
    return "BRL" if raw == BRL_ISO_NUMERIC else "USD"


def participant_institution_type(raw: str) -> str:
    return FINANCIAL_INSTITUTION if raw.strip() == "IF" else NON_FINANCIAL_INSTITUTION


def document_type(raw: str) -> str:
    return "CNPJ" if raw == "1" else "CPF"


CODECS: Mapping[str, Callable[[str], Any]] = {
    "integer": to_integer,
    "currency": to_currency,
    "string": to_trimmed_string,
    "raw": to_raw_string,
    "optional": to_optional_raw,
    "date": to_date,
    "time": to_time,
    "currency_code": currency_code,
    "payment_type": lambda raw: map_code(raw, PAYMENT_TYPES),
    "account_type": lambda raw: map_code(raw, ACCOUNT_TYPES),
    "operation_type": lambda raw: map_code(raw, OPERATION_TYPES),
    "institution_type": participant_institution_type,
    "document_type": document_type,
}
