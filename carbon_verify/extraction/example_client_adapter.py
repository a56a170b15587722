"""Offline extraction client.

Answers every request with the canned slot data wrapped in a short prose
reply, the way real models tend to. Selected with
``EXTRACTION_PROVIDER=example`` for demos and local development.
"""

import json
from typing import ClassVar

from carbon_verify.extraction.client_base import BaseExtractionClient
from carbon_verify.extraction.fallback import DEFAULT_FIELDS
from carbon_verify.intake.models import UploadedFile


class ExampleClientAdapter(BaseExtractionClient):
    """Returns a fixed, valid extraction payload without any network calls."""

    CONFIDENCE: ClassVar[float] = 0.9

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        file: UploadedFile,
    ) -> str:
        _ = model, temperature, prompt
        payload = {
            "documents": [
                {
                    "slot": slot.value,
                    "name": slot.display_name,
                    "fields": fields,
                    "confidence": self.CONFIDENCE,
                }
                for slot, fields in DEFAULT_FIELDS.items()
            ],
            "overallConfidence": self.CONFIDENCE,
        }
        return f"Extracted data for {file.name}:\n{json.dumps(payload, indent=2)}"
