from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class UploadedFile:
    """A single file held in memory between selection and processing."""

    name: str
    mime_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == "application/pdf"

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")


class IntakePolicy(str, Enum):
    """Which upload flow a FileIntake serves."""

    WHOLE_DOCUMENT = "whole_document"
    PER_IMAGE = "per_image"

    def accepts(self, mime_type: str) -> bool:
        if self is IntakePolicy.WHOLE_DOCUMENT:
            return mime_type == "application/pdf"
        return mime_type.startswith("image/")

    @property
    def rejection_message(self) -> str:
        if self is IntakePolicy.WHOLE_DOCUMENT:
            return "Please upload a PDF file containing all required documents"
        return "Please upload an image file"
