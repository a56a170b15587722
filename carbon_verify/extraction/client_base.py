from abc import ABC, abstractmethod

from carbon_verify.intake.models import UploadedFile


class BaseExtractionClient(ABC):
    """Contract for provider-specific document-understanding clients."""

    @abstractmethod
    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        file: UploadedFile,
    ) -> str:
        """Send *prompt* with *file* attached and return the reply text.

        Raises:
            ExtractionNetworkError: if the provider cannot be reached.
            ExtractionError: if the provider returns no usable content.
        """
