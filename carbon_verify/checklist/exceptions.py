class ChecklistError(Exception):
    """Base exception for verification checklist errors."""


class ChecklistItemNotFoundError(ChecklistError):
    """Raised when toggling an item id that is not on the checklist."""
