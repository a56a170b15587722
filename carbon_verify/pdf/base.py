from abc import ABC, abstractmethod

PAGE_SEPARATOR = "\n\n--- Page {number} ---\n"


def join_pages(pages: list[str]) -> str:
    """Join page texts with numbered separators, skipping blank pages.

    Project bundles put one document type per page range, so page markers
    help the model attribute fields to the right document.
    """
    parts = [
        PAGE_SEPARATOR.format(number=number) + text.strip()
        for number, text in enumerate(pages, start=1)
        if text and text.strip()
    ]
    return "".join(parts).strip()


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract page-marked plain text from PDF bytes.

        Returns:
            Text of all non-blank pages, each preceded by a page marker;
            an empty string for a PDF without text.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
