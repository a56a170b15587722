"""REST endpoints for launching project automation and polling its report.

Usage:
    carbon-verify serve
"""

from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from carbon_verify.config.settings import Settings
from carbon_verify.logging.logger import Log
from carbon_verify.reports.exceptions import InvalidProjectIdError, ReportError
from carbon_verify.reports.launcher import AutomationLauncher
from carbon_verify.reports.store import ReportStore


class GenerateReportRequest(BaseModel):
    project_id: str | None = Field(default=None, alias="projectId")


def _message(status_code: int, success: bool, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": success, "message": message},
    )


def create_app(
    settings: Settings,
    launcher: AutomationLauncher | None = None,
    store: ReportStore | None = None,
) -> FastAPI:
    launcher = launcher or AutomationLauncher()
    store = store or ReportStore(Path(settings.reports_dir))

    app = FastAPI(
        title="Carbon Verify API",
        description="Project automation launch and report polling",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/api/automation/generate-report")
    def generate_report(payload: GenerateReportRequest | None = None) -> JSONResponse:
        project_id = (payload.project_id or "").strip() if payload else ""
        if not project_id:
            return _message(400, False, "Project ID is required")
        Log.info(f"Received request to launch automation for project {project_id}")
        try:
            launcher.launch(project_id)
        except InvalidProjectIdError as exc:
            return _message(400, False, str(exc))
        except OSError as exc:
            Log.error(f"Could not launch automation for project {project_id}: {exc}")
            return _message(500, False, "Automation process could not be launched.")
        return _message(202, True, "Automation process has been launched successfully.")

    @app.get("/api/automation/report/{project_id}", response_model=None)
    def get_report_status(project_id: str) -> JSONResponse | dict[str, Any]:
        try:
            status = store.poll(project_id)
        except InvalidProjectIdError as exc:
            return _message(400, False, str(exc))
        except ReportError as exc:
            Log.error(str(exc))
            return _message(500, False, "Report could not be read.")
        if not status.is_ready:
            return JSONResponse(status_code=202, content={"status": "pending"})
        return status.report

    return app
