import pytest

from carbon_verify.extraction.models import DocumentSlot, ProcessedDocumentSlot


class TestProcessedDocumentSlot:
    def test_fields_are_read_only(self) -> None:
        doc = ProcessedDocumentSlot(
            slot=DocumentSlot.PROJECT_PROPOSAL,
            fields={"projectName": "Mangrove Belt"},
            confidence=0.9,
        )
        with pytest.raises(TypeError):
            doc.fields["projectName"] = "Tampered"  # type: ignore[index]
        assert doc.fields == {"projectName": "Mangrove Belt"}

    def test_fields_copied_from_source(self) -> None:
        source = {"ngoName": "Coastal Trust"}
        doc = ProcessedDocumentSlot(
            slot=DocumentSlot.REGISTRATION_CERTIFICATE,
            fields=source,
            confidence=0.9,
        )
        source["ngoName"] = "Changed later"
        assert doc.fields["ngoName"] == "Coastal Trust"

    def test_to_dict_returns_plain_dict(self) -> None:
        doc = ProcessedDocumentSlot(
            slot=DocumentSlot.FIELD_DATA_SHEET,
            fields={"areaPlanted": "4 ha"},
            confidence=0.8,
        )
        payload = doc.to_dict()
        assert type(payload["fields"]) is dict
        assert payload["name"] == "Plantation Log / Field Data Sheet"
