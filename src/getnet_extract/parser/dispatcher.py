"""Line dispatcher: routes each extract line to its record layout.

A decode call is a pure function of its input. Lines are split on ``"\\n"``
only, empty lines are skipped, and lines whose first character is not a known
record type are dropped without error.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from getnet_extract.core.config import DatePolicy
from getnet_extract.core.types import RecordTag
from getnet_extract.layouts.records import DISPATCH_TABLE, RecordLayout
from getnet_extract.models.decoded import DecodedFile

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


def decode_lines(
    lines: Iterable[str],
    policy: DatePolicy = "lenient",
    dispatch: Mapping[RecordTag, RecordLayout] = DISPATCH_TABLE,
) -> DecodedFile:
    """Decode already-split lines into a DecodedFile.

    Under the ``"lenient"`` policy a record with an invalid date or time keeps
    ``None`` in that field; under ``"strict"`` the record is left out. Either
    way the issue is reported in ``DecodedFile.issues`` and decoding goes on.
    """
    result = DecodedFile()
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        if not line:
            continue
        layout = dispatch.get(line[0])
        if layout is None:
            skipped += 1
            logger.debug("Skipping line %d with unknown record type %r", line_number, line[0])
            continue

        decoded = layout.decode(line, line_number=line_number)
        if decoded.issues:
            for issue in decoded.issues:
                issue.record_dropped = policy == "strict"
                logger.warning(
                    "Line %d (%s): %s", line_number, layout.name, issue.message,
                )
            result.issues.extend(decoded.issues)
            if policy == "strict":
                continue
        result.records.append(decoded.record)

    logger.debug(
        "Decoded %d records (%d issues, %d unknown lines skipped)",
        len(result.records), len(result.issues), skipped,
    )
    return result


def decode_extract(
    content: str,
    policy: DatePolicy = "lenient",
    dispatch: Mapping[RecordTag, RecordLayout] = DISPATCH_TABLE,
) -> DecodedFile:
    """Decode the full text of an extract file."""
    return decode_lines(content.split(LINE_SEPARATOR), policy=policy, dispatch=dispatch)
