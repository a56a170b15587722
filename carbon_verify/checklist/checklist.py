from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import replace

from carbon_verify.checklist.exceptions import ChecklistError, ChecklistItemNotFoundError
from carbon_verify.checklist.models import ChecklistItem, ChecklistStatus
from carbon_verify.logging.logger import Log

ChecklistListener = Callable[[list[ChecklistItem]], None]


def default_checklist() -> list[ChecklistItem]:
    """The standard review items for a plantation project, all pending."""
    return [
        ChecklistItem(
            "chk-1",
            "Land Tenure & Rights Verified",
            description="Legal documents cross-referenced with government records.",
        ),
        ChecklistItem(
            "chk-2",
            "Boundary Integrity Confirmed",
            description="Satellite imagery checked against the declared perimeter.",
        ),
        ChecklistItem(
            "chk-3",
            "Community Consent Forms Received",
            description="All required forms from local stakeholders are on file.",
        ),
        ChecklistItem(
            "chk-4",
            "Reforestation Milestones Met",
            description="Planting targets compared with the field data sheet.",
        ),
        ChecklistItem(
            "chk-5",
            "Financial Audit Trail Clear",
            description="Financial reports submitted and reconciled.",
        ),
    ]


class VerificationChecklist:
    """Reviewer checklist whose items cycle status on each toggle.

    Every change hands the listener the complete item list; there are no
    per-item deltas and no automatic transitions.
    """

    def __init__(
        self,
        items: Iterable[ChecklistItem],
        on_change: ChecklistListener | None = None,
    ) -> None:
        self._items = list(items)
        ids = [item.id for item in self._items]
        if len(ids) != len(set(ids)):
            raise ChecklistError("Checklist item ids must be unique")
        self._on_change = on_change

    @property
    def items(self) -> list[ChecklistItem]:
        return list(self._items)

    def get(self, item_id: str) -> ChecklistItem:
        for item in self._items:
            if item.id == item_id:
                return item
        raise ChecklistItemNotFoundError(f"Checklist item '{item_id}' not found")

    def toggle(self, item_id: str) -> list[ChecklistItem]:
        """Advance one item to its next status and return the full new list."""
        current = self.get(item_id)
        updated = replace(current, status=current.status.next())
        self._items = [updated if item.id == item_id else item for item in self._items]
        Log.info(
            f"Checklist item {item_id} '{current.label}': "
            f"{current.status.value} -> {updated.status.value}"
        )
        snapshot = self.items
        if self._on_change is not None:
            self._on_change(snapshot)
        return snapshot

    def summary(self) -> dict[ChecklistStatus, int]:
        counts = Counter(item.status for item in self._items)
        return {status: counts.get(status, 0) for status in ChecklistStatus}

    def is_cleared(self) -> bool:
        """True when every item is completed."""
        return bool(self._items) and all(
            item.status is ChecklistStatus.COMPLETED for item in self._items
        )
