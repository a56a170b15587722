from carbon_verify.extraction.adapter import ExtractionAdapter
from carbon_verify.extraction.factory import ExtractionAdapterFactory
from carbon_verify.extraction.models import (
    DocumentSlot,
    ExtractionOutcome,
    OCRResult,
    OutcomeKind,
    ProcessedDocumentSlot,
)
from carbon_verify.extraction.normalizer import ResultNormalizer

__all__ = [
    "DocumentSlot",
    "ExtractionAdapter",
    "ExtractionAdapterFactory",
    "ExtractionOutcome",
    "OCRResult",
    "OutcomeKind",
    "ProcessedDocumentSlot",
    "ResultNormalizer",
]
