from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ReportState(str, Enum):
    PENDING = "pending"
    READY = "ready"


@dataclass(frozen=True)
class ReportStatus:
    """Result of one poll: pending, or ready with the report payload."""

    project_id: str
    state: ReportState
    report: dict[str, Any] = field(default_factory=dict)

    @property
    def is_ready(self) -> bool:
        return self.state is ReportState.READY
