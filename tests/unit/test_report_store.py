import threading
import time
from pathlib import Path

import pytest

from carbon_verify.reports.exceptions import InvalidProjectIdError, ReportError
from carbon_verify.reports.models import ReportState
from carbon_verify.reports.store import ReportStore, validate_project_id


class TestValidateProjectId:
    @pytest.mark.parametrize("project_id", ["proj-42", "ABC_1", "x" * 128])
    def test_accepts_safe_ids(self, project_id: str) -> None:
        assert validate_project_id(project_id) == project_id

    @pytest.mark.parametrize("project_id", ["", "../etc/passwd", "a b", "x" * 129, "id.json"])
    def test_rejects_unsafe_ids(self, project_id: str) -> None:
        with pytest.raises(InvalidProjectIdError):
            validate_project_id(project_id)


class TestReportStore:
    def test_poll_missing_report_is_pending(self, tmp_path: Path) -> None:
        status = ReportStore(tmp_path).poll("proj-1")
        assert status.state is ReportState.PENDING
        assert not status.is_ready

    def test_poll_delivers_once(self, tmp_path: Path) -> None:
        store = ReportStore(tmp_path / "reports")
        store.save("proj-1", {"projectId": "proj-1", "actionsReplayed": 5})
        first = store.poll("proj-1")
        assert first.is_ready
        assert first.report["actionsReplayed"] == 5
        assert not store.path_for("proj-1").exists()
        assert store.poll("proj-1").state is ReportState.PENDING

    def test_save_leaves_no_temp_files(self, tmp_path: Path) -> None:
        store = ReportStore(tmp_path)
        store.save("proj-2", {"ok": True})
        assert [p.name for p in tmp_path.iterdir()] == ["proj-2.json"]

    def test_corrupt_report_raises(self, tmp_path: Path) -> None:
        (tmp_path / "proj-3.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ReportError, match="corrupt"):
            ReportStore(tmp_path).poll("proj-3")

    def test_invalid_id_rejected_before_touching_disk(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidProjectIdError):
            ReportStore(tmp_path).poll("../secret")

    def test_overlapping_polls_deliver_once(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        store = ReportStore(tmp_path)
        store.save("proj-4", {"ok": True})
        original_read = Path.read_text

        def _slow_read(self: Path, *args, **kwargs) -> str:
            text = original_read(self, *args, **kwargs)
            time.sleep(0.05)
            return text

        monkeypatch.setattr(Path, "read_text", _slow_read)
        start = threading.Barrier(8)
        states: list[ReportState] = []

        def _poll() -> None:
            start.wait()
            states.append(store.poll("proj-4").state)

        threads = [threading.Thread(target=_poll) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert states.count(ReportState.READY) == 1
        assert states.count(ReportState.PENDING) == 7
        assert list(tmp_path.iterdir()) == []
