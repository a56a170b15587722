import subprocess
import sys
from collections.abc import Sequence

from carbon_verify.logging.logger import Log
from carbon_verify.reports.store import validate_project_id


class AutomationLauncher:
    """Starts the browser automation for a project as a detached process.

    The caller gets control back immediately; the child reports back only
    through the report store.
    """

    DEFAULT_COMMAND: tuple[str, ...] = (sys.executable, "-m", "carbon_verify.automation.runner")

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self._command = tuple(command) if command is not None else self.DEFAULT_COMMAND

    def launch(self, project_id: str) -> subprocess.Popen[bytes]:
        validate_project_id(project_id)
        Log.info(f"Launching automation for project {project_id}")
        return subprocess.Popen(
            [*self._command, project_id],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
