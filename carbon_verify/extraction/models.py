from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class DocumentSlot(str, Enum):
    """The four document categories every result carries, keyed by a stable id."""

    PROJECT_PROPOSAL = "project_proposal"
    REGISTRATION_CERTIFICATE = "registration_certificate"
    FIELD_DATA_SHEET = "field_data_sheet"
    PHOTOGRAPHIC_REPORT = "photographic_report"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def field_keys(self) -> tuple[str, ...]:
        return _FIELD_KEYS[self]


_DISPLAY_NAMES: dict[DocumentSlot, str] = {
    DocumentSlot.PROJECT_PROPOSAL: "Project Proposal / Plantation Plan",
    DocumentSlot.REGISTRATION_CERTIFICATE: "NGO Registration Certificate",
    DocumentSlot.FIELD_DATA_SHEET: "Plantation Log / Field Data Sheet",
    DocumentSlot.PHOTOGRAPHIC_REPORT: "Photographs / Drone Images Report",
}

_FIELD_KEYS: dict[DocumentSlot, tuple[str, ...]] = {
    DocumentSlot.PROJECT_PROPOSAL: (
        "projectName",
        "areaPlanned",
        "speciesToBePlanted",
        "numberOfSaplings",
        "gpsCoordinates",
        "plantingStartDate",
        "plantingEndDate",
    ),
    DocumentSlot.REGISTRATION_CERTIFICATE: (
        "ngoName",
        "registrationNumber",
        "dateOfRegistration",
        "issuingAuthority",
        "validity",
    ),
    DocumentSlot.FIELD_DATA_SHEET: (
        "dateOfObservation",
        "areaPlanted",
        "numberOfSaplingSurvived",
        "healthStatus",
        "gpsCoordinates",
        "observerName",
    ),
    DocumentSlot.PHOTOGRAPHIC_REPORT: (
        "photoImageName",
        "timestamp",
        "gpsCoordinates",
        "caption",
        "droneFieldOfficerId",
    ),
}

CANONICAL_SLOTS: tuple[DocumentSlot, ...] = tuple(DocumentSlot)


@dataclass(frozen=True)
class ProcessedDocumentSlot:
    """Extracted fields and confidence for one document slot.

    ``fields`` is copied on construction and exposed read-only, so a result
    cannot drift from the fingerprint computed over it.
    """

    slot: DocumentSlot
    fields: Mapping[str, str]
    confidence: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def name(self) -> str:
        return self.slot.display_name

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "fields": dict(self.fields),
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class OCRResult:
    """Pipeline output: exactly four slots in canonical order."""

    documents: tuple[ProcessedDocumentSlot, ...]
    fingerprint: str
    overall_confidence: float

    def document(self, slot: DocumentSlot) -> ProcessedDocumentSlot:
        for doc in self.documents:
            if doc.slot is slot:
                return doc
        raise KeyError(slot.value)

    def to_dict(self) -> dict[str, object]:
        return {
            "documents": [doc.to_dict() for doc in self.documents],
            "fingerprint": self.fingerprint,
            "overallConfidence": self.overall_confidence,
        }


class OutcomeKind(str, Enum):
    REAL = "real"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ExtractionOutcome:
    """Tagged extraction result.

    ``kind`` is ``fallback`` when the provider call or reply parsing failed and
    the result is canned demonstration data. ``backfilled_slots`` lists slots of
    a ``real`` outcome that were filled from defaults.
    """

    kind: OutcomeKind
    result: OCRResult
    backfilled_slots: tuple[DocumentSlot, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def is_real(self) -> bool:
        return self.kind is OutcomeKind.REAL

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "backfilledSlots": [slot.value for slot in self.backfilled_slots],
            "error": self.error,
            **self.result.to_dict(),
        }
