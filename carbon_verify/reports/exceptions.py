class ReportError(Exception):
    """Base exception for report storage errors."""


class InvalidProjectIdError(ReportError):
    """Raised when a project id contains characters unsafe for a file name."""
