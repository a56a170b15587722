import json
import os
import re
import tempfile
import uuid
from pathlib import Path
from typing import Any

from carbon_verify.logging.logger import Log
from carbon_verify.reports.exceptions import InvalidProjectIdError, ReportError
from carbon_verify.reports.models import ReportState, ReportStatus

_PROJECT_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


def validate_project_id(project_id: str) -> str:
    if not _PROJECT_ID_RE.match(project_id):
        raise InvalidProjectIdError(f"Invalid project id: {project_id!r}")
    return project_id


class ReportStore:
    """Report files under ``{reports_dir}/{project_id}.json``.

    Delivery is at most once: a successful poll deletes the file, and a
    missing file always reads as pending, whether the run is slow or dead.
    """

    def __init__(self, reports_dir: Path) -> None:
        self._reports_dir = reports_dir

    @property
    def reports_dir(self) -> Path:
        return self._reports_dir

    def path_for(self, project_id: str) -> Path:
        return self._reports_dir / f"{validate_project_id(project_id)}.json"

    def save(self, project_id: str, payload: dict[str, Any]) -> Path:
        """Write the report atomically so a poll never sees a partial file."""
        path = self.path_for(project_id)
        self._reports_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._reports_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        Log.info(f"Report saved for project {project_id}")
        return path

    def poll(self, project_id: str) -> ReportStatus:
        """Return the report once, deleting it; pending while it is absent.

        The file is first renamed to a name private to this call, so of two
        overlapping polls only one can claim it.

        Raises:
            InvalidProjectIdError: for ids that are not safe file names.
            ReportError: if the report file exists but is not valid JSON.
        """
        path = self.path_for(project_id)
        claimed = path.with_name(f"{path.name}.{uuid.uuid4().hex}.claimed")
        try:
            os.replace(path, claimed)
        except FileNotFoundError:
            Log.debug(f"Report for project {project_id} still pending")
            return ReportStatus(project_id=project_id, state=ReportState.PENDING)
        try:
            raw = claimed.read_text(encoding="utf-8")
        finally:
            claimed.unlink(missing_ok=True)
        try:
            report = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ReportError(f"Report for project {project_id} is corrupt: {exc}") from exc
        Log.info(f"Delivered report for project {project_id}")
        return ReportStatus(project_id=project_id, state=ReportState.READY, report=report)
