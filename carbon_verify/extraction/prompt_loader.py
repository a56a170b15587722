from pathlib import Path

from carbon_verify.extraction.exceptions import ExtractionError
from carbon_verify.extraction.models import CANONICAL_SLOTS

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The raw template with ``{file_name}`` and ``{slot_catalog}`` placeholders.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc


def build_slot_catalog() -> str:
    """Numbered list of slots with their ids and field keys."""
    lines: list[str] = []
    for number, slot in enumerate(CANONICAL_SLOTS, start=1):
        lines.append(f"{number}. {slot.display_name.upper()} (slot id: {slot.value})")
        lines.extend(f"   - [{key}]" for key in slot.field_keys)
    return "\n".join(lines)
