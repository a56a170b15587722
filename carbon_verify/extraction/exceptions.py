class ExtractionError(Exception):
    """Raised when document extraction fails."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class ExtractionResponseError(ExtractionError):
    """Raised when the provider reply holds no usable JSON object."""


class ExtractionConfigError(ExtractionError):
    """Raised when the extraction provider cannot be configured from settings."""
