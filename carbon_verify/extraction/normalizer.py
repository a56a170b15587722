"""Builds a four-slot OCRResult from whatever the provider returned."""

import re
from typing import Any

from carbon_verify.extraction.fallback import (
    DEFAULT_OVERALL_CONFIDENCE,
    DEFAULT_SLOT_CONFIDENCE,
    default_slot,
)
from carbon_verify.extraction.models import (
    CANONICAL_SLOTS,
    DocumentSlot,
    OCRResult,
    ProcessedDocumentSlot,
)
from carbon_verify.fingerprint.fingerprint import fingerprint_documents
from carbon_verify.logging.logger import Log

_WHITESPACE_RE = re.compile(r"\s+")


def _alias_key(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value).strip().casefold()


# Every accepted spelling, matched exactly after whitespace/case folding.
SLOT_ALIASES: dict[str, DocumentSlot] = {
    _alias_key(alias): slot
    for slot, aliases in {
        DocumentSlot.PROJECT_PROPOSAL: (
            "project_proposal",
            "Project Proposal / Plantation Plan",
            "Project Proposal",
            "Plantation Plan",
        ),
        DocumentSlot.REGISTRATION_CERTIFICATE: (
            "registration_certificate",
            "NGO Registration Certificate",
            "Registration Certificate",
        ),
        DocumentSlot.FIELD_DATA_SHEET: (
            "field_data_sheet",
            "Plantation Log / Field Data Sheet",
            "Plantation Log",
            "Field Data Sheet",
        ),
        DocumentSlot.PHOTOGRAPHIC_REPORT: (
            "photographic_report",
            "Photographs / Drone Images Report",
            "Photographs",
            "Drone Images Report",
        ),
    }.items()
    for alias in aliases
}


def resolve_slot(entry: dict[str, Any]) -> DocumentSlot | None:
    """Map an adapter document entry to its slot via ``slot`` or ``name``."""
    for key in ("slot", "name"):
        value = entry.get(key)
        if isinstance(value, str):
            slot = SLOT_ALIASES.get(_alias_key(value))
            if slot is not None:
                return slot
    return None


class ResultNormalizer:
    """Guarantees exactly four slots, backfilling from defaults per slot."""

    def normalize(self, raw: dict[str, Any] | None) -> OCRResult:
        result, _ = self.normalize_detailed(raw)
        return result

    def normalize_detailed(
        self, raw: dict[str, Any] | None
    ) -> tuple[OCRResult, tuple[DocumentSlot, ...]]:
        """Normalize *raw* and report which slots fell back to defaults."""
        raw = raw if isinstance(raw, dict) else {}
        entries = self._index_entries(raw.get("documents"))

        documents: list[ProcessedDocumentSlot] = []
        backfilled: list[DocumentSlot] = []
        for slot in CANONICAL_SLOTS:
            doc = self._build_slot(slot, entries.get(slot))
            if doc is None:
                doc = default_slot(slot)
                backfilled.append(slot)
            documents.append(doc)

        if backfilled:
            Log.warning(
                "Backfilled slots from defaults: "
                + ", ".join(slot.value for slot in backfilled)
            )

        docs = tuple(documents)
        result = OCRResult(
            documents=docs,
            fingerprint=fingerprint_documents(docs),
            overall_confidence=_coerce_confidence(
                raw.get("overallConfidence"), DEFAULT_OVERALL_CONFIDENCE
            ),
        )
        return result, tuple(backfilled)

    @staticmethod
    def _index_entries(raw_documents: Any) -> dict[DocumentSlot, dict[str, Any]]:
        entries: dict[DocumentSlot, dict[str, Any]] = {}
        if not isinstance(raw_documents, list):
            return entries
        for entry in raw_documents:
            if not isinstance(entry, dict):
                continue
            slot = resolve_slot(entry)
            if slot is None:
                Log.debug(f"Ignoring unrecognized document entry: {entry.get('name')!r}")
                continue
            if slot in entries:
                Log.debug(f"Ignoring duplicate entry for slot {slot.value}")
                continue
            entries[slot] = entry
        return entries

    @staticmethod
    def _build_slot(
        slot: DocumentSlot, entry: dict[str, Any] | None
    ) -> ProcessedDocumentSlot | None:
        if entry is None:
            return None
        fields = _coerce_fields(slot, entry.get("fields"))
        if not fields:
            return None
        return ProcessedDocumentSlot(
            slot=slot,
            fields=fields,
            confidence=_coerce_confidence(entry.get("confidence"), DEFAULT_SLOT_CONFIDENCE),
        )


def _coerce_fields(slot: DocumentSlot, raw: Any) -> dict[str, str]:
    """Keep vocabulary keys (case-insensitive) with non-empty scalar values."""
    if not isinstance(raw, dict):
        return {}
    vocabulary = {key.casefold(): key for key in slot.field_keys}
    fields: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        canonical = vocabulary.get(key.casefold())
        if canonical is None or canonical in fields:
            continue
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            continue
        text = str(value).strip()
        if text:
            fields[canonical] = text
    return fields


def _coerce_confidence(value: Any, default: float) -> float:
    """Keep values in (0, 1]; zero counts as unreported, like a missing value."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not 0.0 < value <= 1.0:
        return default
    return float(value)
