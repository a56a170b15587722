"""Canned slot data used when real extraction is unavailable."""

import random

from carbon_verify.extraction.models import (
    CANONICAL_SLOTS,
    DocumentSlot,
    ProcessedDocumentSlot,
)

DEFAULT_SLOT_CONFIDENCE = 0.85
DEFAULT_OVERALL_CONFIDENCE = 0.85
FALLBACK_OVERALL_CONFIDENCE = 0.87
_FALLBACK_CONFIDENCE_SPREAD = 0.1

DEFAULT_FIELDS: dict[DocumentSlot, dict[str, str]] = {
    DocumentSlot.PROJECT_PROPOSAL: {
        "projectName": "Blue Carbon Mangrove Restoration Project - Phase 2",
        "areaPlanned": "25.5 hectares",
        "speciesToBePlanted": (
            "Rhizophora mucronata, Avicennia marina, Bruguiera gymnorrhiza"
        ),
        "numberOfSaplings": "15,000",
        "gpsCoordinates": "12.9716° N, 77.5946° E",
        "plantingStartDate": "January 15, 2024",
        "plantingEndDate": "March 30, 2024",
    },
    DocumentSlot.REGISTRATION_CERTIFICATE: {
        "ngoName": "Green Earth Foundation",
        "registrationNumber": "REG/2020/NGO/001234",
        "dateOfRegistration": "March 15, 2020",
        "issuingAuthority": "Ministry of Corporate Affairs, India",
        "validity": "Perpetual",
    },
    DocumentSlot.FIELD_DATA_SHEET: {
        "dateOfObservation": "October 15, 2024",
        "areaPlanted": "18.2 hectares",
        "numberOfSaplingSurvived": "12,500",
        "healthStatus": "85% healthy growth, good root establishment observed",
        "gpsCoordinates": "12.9716° N, 77.5946° E",
        "observerName": "Dr. Ravi Kumar, Field Officer",
    },
    DocumentSlot.PHOTOGRAPHIC_REPORT: {
        "photoImageName": "drone_survey_oct_2024.jpg",
        "timestamp": "2024-10-15 14:30:00",
        "gpsCoordinates": "12.9716° N, 77.5946° E",
        "caption": "Aerial view showing mangrove canopy growth after 8 months",
        "droneFieldOfficerId": "DRONE-001/Dr. Priya Sharma",
    },
}


def default_slot(slot: DocumentSlot) -> ProcessedDocumentSlot:
    return ProcessedDocumentSlot(
        slot=slot,
        fields=dict(DEFAULT_FIELDS[slot]),
        confidence=DEFAULT_SLOT_CONFIDENCE,
    )


def fallback_documents(
    rng: random.Random | None = None,
) -> tuple[ProcessedDocumentSlot, ...]:
    """All four slots with canned fields and confidence in [0.85, 0.95)."""
    rng = rng or random.Random()
    return tuple(
        ProcessedDocumentSlot(
            slot=slot,
            fields=dict(DEFAULT_FIELDS[slot]),
            confidence=DEFAULT_SLOT_CONFIDENCE + rng.random() * _FALLBACK_CONFIDENCE_SPREAD,
        )
        for slot in CANONICAL_SLOTS
    )
