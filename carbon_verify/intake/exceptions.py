class IntakeError(Exception):
    """Base exception for all file intake errors."""


class InvalidFileTypeError(IntakeError):
    """Raised when a file's declared MIME type is not accepted by the flow."""


class MissingFileError(IntakeError):
    """Raised when processing is requested before any file was accepted."""
