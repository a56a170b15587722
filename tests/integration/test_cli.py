import json
from pathlib import Path

import pytest

from carbon_verify.main import main


@pytest.fixture(autouse=True)
def _fast_example_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXTRACTION_PROVIDER", "example")
    for name in ("ANALYZING", "EXTRACTING", "GENERATING", "FINALIZING"):
        monkeypatch.setenv(f"STAGE_DELAY_{name}_SECONDS", "0")
    monkeypatch.setenv("LEDGER_COMMIT_DELAY_SECONDS", "0")


class TestProcessCommand:
    def test_prints_outcome(
        self, tmp_path: Path, project_pdf_bytes: bytes, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pdf = tmp_path / "bundle.pdf"
        pdf.write_bytes(project_pdf_bytes)
        assert main(["process", str(pdf)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["outcome"]["kind"] == "real"
        assert len(output["outcome"]["documents"]) == 4
        assert "transaction" not in output

    def test_commit_writes_proof(
        self, tmp_path: Path, project_pdf_bytes: bytes, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pdf = tmp_path / "bundle.pdf"
        pdf.write_bytes(project_pdf_bytes)
        proofs = tmp_path / "proofs"
        code = main(["process", str(pdf), "--commit", "--proof-dir", str(proofs)])
        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["transaction"]["status"] == "confirmed"
        assert output["transaction"]["documentHash"] == output["outcome"]["fingerprint"]
        assert Path(output["proofPath"]).exists()

    def test_rejects_non_pdf(self, tmp_path: Path) -> None:
        notes = tmp_path / "notes.txt"
        notes.write_text("hello", encoding="utf-8")
        assert main(["process", str(notes)]) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["process", str(tmp_path / "absent.pdf")]) == 1

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        folder = tmp_path / "bundle.pdf"
        folder.mkdir()
        assert main(["process", str(folder)]) == 1

    def test_unknown_provider(
        self, tmp_path: Path, project_pdf_bytes: bytes, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EXTRACTION_PROVIDER", "mystery")
        pdf = tmp_path / "bundle.pdf"
        pdf.write_bytes(project_pdf_bytes)
        assert main(["process", str(pdf)]) == 1
