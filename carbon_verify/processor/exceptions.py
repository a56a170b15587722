class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ProcessingCancelledError(ProcessorError):
    """Raised when a run is cancelled before its last stage completes."""


class ProcessingInProgressError(ProcessorError):
    """Raised when a run is requested while another is still in flight."""


class InvalidStagePlanError(ProcessorError):
    """Raised when a stage plan violates ordering or progress rules."""
