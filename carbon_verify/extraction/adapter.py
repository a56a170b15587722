"""AI-powered extraction of the four project document slots."""

import random
from pathlib import Path

from carbon_verify.extraction.client_base import BaseExtractionClient
from carbon_verify.extraction.exceptions import ExtractionError
from carbon_verify.extraction.fallback import FALLBACK_OVERALL_CONFIDENCE, fallback_documents
from carbon_verify.extraction.models import (
    CANONICAL_SLOTS,
    ExtractionOutcome,
    OCRResult,
    OutcomeKind,
)
from carbon_verify.extraction.normalizer import ResultNormalizer
from carbon_verify.extraction.parser import parse_reply
from carbon_verify.extraction.prompt_loader import build_slot_catalog, load_prompt_template
from carbon_verify.fingerprint.fingerprint import fingerprint_documents
from carbon_verify.intake.models import UploadedFile
from carbon_verify.logging.logger import Log


class ExtractionAdapter:
    """Sends one file to the provider and always returns a four-slot result.

    Provider and parsing failures never propagate: they are logged and turned
    into a ``fallback`` outcome carrying canned data, so callers must check
    ``ExtractionOutcome.kind`` before trusting the confidence scores.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        normalizer: ResultNormalizer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._slot_catalog = build_slot_catalog()
        self._normalizer = normalizer or ResultNormalizer()
        self._rng = rng or random.Random()

    def extract(self, file: UploadedFile) -> ExtractionOutcome:
        prompt = self._build_prompt(file)
        Log.debug(f"Extraction prompt:\n{prompt}")

        try:
            reply = self._client.generate_content(
                model=self._model,
                temperature=self._temperature,
                prompt=prompt,
                file=file,
            )
            Log.debug(f"AI raw response:\n{reply}")
            raw = parse_reply(reply)
        except ExtractionError as exc:
            Log.exception(f"Extraction failed for {file.name}, using fallback data", exc)
            return self._fallback(str(exc))

        result, backfilled = self._normalizer.normalize_detailed(raw)
        Log.info(
            f"Extraction complete for {file.name}: "
            f"{len(CANONICAL_SLOTS) - len(backfilled)}/{len(CANONICAL_SLOTS)} slots extracted, "
            f"overall confidence {result.overall_confidence:.2f}"
        )
        return ExtractionOutcome(
            kind=OutcomeKind.REAL,
            result=result,
            backfilled_slots=backfilled,
        )

    def _build_prompt(self, file: UploadedFile) -> str:
        return self._prompt_template.format(
            file_name=file.name,
            slot_catalog=self._slot_catalog,
        )

    def _fallback(self, error: str) -> ExtractionOutcome:
        documents = fallback_documents(self._rng)
        result = OCRResult(
            documents=documents,
            fingerprint=fingerprint_documents(documents),
            overall_confidence=FALLBACK_OVERALL_CONFIDENCE,
        )
        return ExtractionOutcome(
            kind=OutcomeKind.FALLBACK,
            result=result,
            backfilled_slots=CANONICAL_SLOTS,
            error=error,
        )
