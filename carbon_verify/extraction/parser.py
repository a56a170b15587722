"""Locates the JSON payload inside a free-text provider reply."""

import json
from typing import Any

from carbon_verify.extraction.exceptions import ExtractionResponseError

_DECODER = json.JSONDecoder()


def _strip_code_fences(raw: str) -> str:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    return cleaned


def parse_reply(raw: str) -> dict[str, Any]:
    """Return the first JSON object embedded in *raw*.

    Models often wrap the payload in prose or markdown fences, so every ``{``
    is tried as the start of an object until one decodes.

    Raises:
        ExtractionResponseError: if no JSON object can be decoded, or the
            reply is too deeply nested or holds numbers too long to convert.
    """
    text = _strip_code_fences(raw)
    start = text.find("{")
    while start != -1:
        try:
            parsed, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            start = text.find("{", start + 1)
            continue
        except (ValueError, RecursionError) as exc:
            # Nesting past the recursion limit or oversized integer literals.
            raise ExtractionResponseError(f"Provider reply could not be decoded: {exc}") from exc
        if isinstance(parsed, dict):
            return parsed
        start = text.find("{", start + 1)
    raise ExtractionResponseError("No JSON object found in provider reply")
