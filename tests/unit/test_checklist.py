from unittest.mock import MagicMock

import pytest

from carbon_verify.checklist.checklist import VerificationChecklist, default_checklist
from carbon_verify.checklist.exceptions import ChecklistError, ChecklistItemNotFoundError
from carbon_verify.checklist.models import ChecklistItem, ChecklistStatus


class TestStatusCycle:
    def test_cycle_order(self) -> None:
        assert ChecklistStatus.PENDING.next() is ChecklistStatus.COMPLETED
        assert ChecklistStatus.COMPLETED.next() is ChecklistStatus.WARNING
        assert ChecklistStatus.WARNING.next() is ChecklistStatus.FAILED
        assert ChecklistStatus.FAILED.next() is ChecklistStatus.PENDING

    def test_badges(self) -> None:
        assert ChecklistStatus.COMPLETED.badge == "Verified"
        assert ChecklistStatus.FAILED.badge == "Issues Found"


class TestDefaultChecklist:
    def test_five_pending_items(self) -> None:
        items = default_checklist()
        assert [item.id for item in items] == ["chk-1", "chk-2", "chk-3", "chk-4", "chk-5"]
        assert all(item.status is ChecklistStatus.PENDING for item in items)


class TestToggle:
    def test_toggle_advances_only_target(self) -> None:
        checklist = VerificationChecklist(default_checklist())
        items = checklist.toggle("chk-2")
        assert items[1].status is ChecklistStatus.COMPLETED
        assert all(item.status is ChecklistStatus.PENDING for i, item in enumerate(items) if i != 1)

    def test_four_toggles_return_to_pending(self) -> None:
        checklist = VerificationChecklist(default_checklist())
        for _ in range(4):
            checklist.toggle("chk-1")
        assert checklist.get("chk-1").status is ChecklistStatus.PENDING

    def test_listener_receives_full_list(self) -> None:
        listener = MagicMock()
        checklist = VerificationChecklist(default_checklist(), on_change=listener)
        checklist.toggle("chk-3")
        (snapshot,), _ = listener.call_args
        assert len(snapshot) == 5
        assert snapshot[2].status is ChecklistStatus.COMPLETED

    def test_returned_list_is_a_copy(self) -> None:
        checklist = VerificationChecklist(default_checklist())
        items = checklist.toggle("chk-1")
        items.clear()
        assert len(checklist.items) == 5

    def test_unknown_id_raises_and_does_not_notify(self) -> None:
        listener = MagicMock()
        checklist = VerificationChecklist(default_checklist(), on_change=listener)
        with pytest.raises(ChecklistItemNotFoundError, match="chk-9"):
            checklist.toggle("chk-9")
        listener.assert_not_called()


class TestConstruction:
    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ChecklistError, match="unique"):
            VerificationChecklist([ChecklistItem("a", "A"), ChecklistItem("a", "B")])


class TestSummary:
    def test_counts_every_status(self) -> None:
        checklist = VerificationChecklist(default_checklist())
        checklist.toggle("chk-1")
        checklist.toggle("chk-2")
        checklist.toggle("chk-2")
        assert checklist.summary() == {
            ChecklistStatus.PENDING: 3,
            ChecklistStatus.COMPLETED: 1,
            ChecklistStatus.WARNING: 1,
            ChecklistStatus.FAILED: 0,
        }

    def test_cleared_when_all_completed(self) -> None:
        checklist = VerificationChecklist(default_checklist())
        assert not checklist.is_cleared()
        for item in checklist.items:
            checklist.toggle(item.id)
        assert checklist.is_cleared()

    def test_empty_checklist_is_not_cleared(self) -> None:
        assert not VerificationChecklist([]).is_cleared()
