from dataclasses import dataclass
from enum import Enum


class ChecklistStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    WARNING = "warning"
    FAILED = "failed"

    def next(self) -> "ChecklistStatus":
        """pending -> completed -> warning -> failed -> pending."""
        return _CYCLE[self]

    @property
    def badge(self) -> str:
        return _BADGES[self]


_CYCLE: dict[ChecklistStatus, ChecklistStatus] = {
    ChecklistStatus.PENDING: ChecklistStatus.COMPLETED,
    ChecklistStatus.COMPLETED: ChecklistStatus.WARNING,
    ChecklistStatus.WARNING: ChecklistStatus.FAILED,
    ChecklistStatus.FAILED: ChecklistStatus.PENDING,
}

_BADGES: dict[ChecklistStatus, str] = {
    ChecklistStatus.PENDING: "Pending",
    ChecklistStatus.COMPLETED: "Verified",
    ChecklistStatus.WARNING: "Needs Review",
    ChecklistStatus.FAILED: "Issues Found",
}


@dataclass(frozen=True)
class ChecklistItem:
    id: str
    label: str
    status: ChecklistStatus = ChecklistStatus.PENDING
    description: str | None = None
