class AutomationError(Exception):
    """Raised when the browser automation cannot complete."""


class AuthStateMissingError(AutomationError):
    """Raised when no captured session file exists for the automation."""
