"""Decoder for the Getnet "Extrato Eletrônico" fixed-width settlement file."""

from __future__ import annotations

from getnet_extract.models.decoded import DecodedFile, DecodeIssue
from getnet_extract.parser.dispatcher import decode_extract, decode_lines

__all__ = ["DecodeIssue", "DecodedFile", "decode_extract", "decode_lines"]
