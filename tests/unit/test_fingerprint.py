import re
from dataclasses import replace

from carbon_verify.extraction.fallback import default_slot
from carbon_verify.extraction.models import CANONICAL_SLOTS, OCRResult
from carbon_verify.fingerprint.fingerprint import (
    fingerprint,
    fingerprint_documents,
    rolling_checksum,
    serialize_documents,
)

_DIGEST_RE = re.compile(r"^0x[0-9a-f]{64}$")


def _documents():
    return tuple(default_slot(slot) for slot in CANONICAL_SLOTS)


class TestRollingChecksum:
    def test_empty_string(self) -> None:
        assert rolling_checksum("") == 0

    def test_small_input(self) -> None:
        assert rolling_checksum("ab") == 97 * 31 + 98

    def test_astral_character_counts_as_surrogate_pair(self) -> None:
        # U+1F600 is D83D DE00 in UTF-16
        assert rolling_checksum("\U0001F600") == 0xD83D * 31 + 0xDE00

    def test_wraps_to_signed_32_bit(self) -> None:
        value = rolling_checksum("x" * 200)
        assert -(2**31) <= value < 2**31


class TestFingerprint:
    def test_format(self) -> None:
        assert _DIGEST_RE.match(fingerprint_documents(_documents()))

    def test_deterministic(self) -> None:
        assert fingerprint_documents(_documents()) == fingerprint_documents(_documents())

    def test_changes_with_field_value(self) -> None:
        docs = list(_documents())
        docs[0] = replace(docs[0], fields={**docs[0].fields, "projectName": "Other"})
        assert fingerprint_documents(tuple(docs)) != fingerprint_documents(_documents())

    def test_changes_with_confidence(self) -> None:
        docs = list(_documents())
        docs[3] = replace(docs[3], confidence=0.5)
        assert fingerprint_documents(tuple(docs)) != fingerprint_documents(_documents())

    def test_short_checksum_padded(self) -> None:
        digest = fingerprint_documents(())
        # "[]" hashes to 91 * 31 + 93 = 0xb62
        assert digest == "0x00000b62" + "a" * 56

    def test_result_fingerprint_ignores_stored_value(self) -> None:
        docs = _documents()
        result = OCRResult(documents=docs, fingerprint="0xstale", overall_confidence=0.9)
        assert fingerprint(result) == fingerprint_documents(docs)


class TestSerializeDocuments:
    def test_integral_confidence_has_no_fraction(self) -> None:
        docs = (replace(default_slot(CANONICAL_SLOTS[0]), confidence=1.0),)
        assert serialize_documents(docs).endswith('"confidence":1}]')

    def test_fractional_confidence_kept(self) -> None:
        docs = (default_slot(CANONICAL_SLOTS[0]),)
        assert serialize_documents(docs).endswith('"confidence":0.85}]')

    def test_non_ascii_written_verbatim(self) -> None:
        docs = (default_slot(CANONICAL_SLOTS[0]),)
        assert "12.9716° N" in serialize_documents(docs)
