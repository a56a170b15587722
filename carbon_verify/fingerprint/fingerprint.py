"""Display fingerprint for OCR results.

This is a 32-bit rolling checksum dressed up to look like a 256-bit digest.
It identifies a result on screen and in the simulated ledger record; it is
not collision resistant and must not be used as a tamper check.

The checksum runs over UTF-16 code units, and integral confidences serialize
without a fractional part (``1``, not ``1.0``), so the value matches what a
browser computes over ``JSON.stringify`` of the same documents. Confidences
small enough for exponent notation still render as ``1e-07`` rather than
``1e-7``.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from carbon_verify.extraction.models import OCRResult, ProcessedDocumentSlot

DIGEST_HEX_LENGTH = 64
_MIN_HEX_LENGTH = 8
_FILLER = "a"
_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def rolling_checksum(text: str) -> int:
    """``h = h * 31 + unit`` over UTF-16 code units, wrapped to signed 32 bits."""
    data = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return h


def _json_number(value: float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def serialize_documents(documents: Sequence[ProcessedDocumentSlot]) -> str:
    return json.dumps(
        [{**doc.to_dict(), "confidence": _json_number(doc.confidence)} for doc in documents],
        separators=(",", ":"),
        ensure_ascii=False,
    )


def fingerprint_documents(documents: Sequence[ProcessedDocumentSlot]) -> str:
    hex_digest = format(abs(rolling_checksum(serialize_documents(documents))), "x")
    hex_digest = hex_digest.rjust(_MIN_HEX_LENGTH, "0")
    return "0x" + hex_digest.ljust(DIGEST_HEX_LENGTH, _FILLER)


def fingerprint(result: OCRResult) -> str:
    """Fingerprint of a result's documents; the stored fingerprint is ignored."""
    return fingerprint_documents(result.documents)
