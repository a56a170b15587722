import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from carbon_verify.intake.models import UploadedFile


@pytest.fixture()
def project_pdf_bytes() -> bytes:
    """Two-page project bundle with a proposal page and a registration page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Project Proposal / Plantation Plan")
    c.drawString(72, 700, "Project Name: Mangrove Belt Phase 3")
    c.showPage()
    c.drawString(72, 720, "NGO Registration Certificate")
    c.drawString(72, 700, "Registration Number: REG/2021/NGO/004455")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def blank_pdf_bytes() -> bytes:
    """A valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def project_pdf(project_pdf_bytes: bytes) -> UploadedFile:
    return UploadedFile(
        name="bundle.pdf",
        mime_type="application/pdf",
        data=project_pdf_bytes,
    )


@pytest.fixture()
def drone_image() -> UploadedFile:
    return UploadedFile(
        name="drone.png",
        mime_type="image/png",
        data=b"\x89PNG\r\n\x1a\n" + b"\x00" * 16,
    )
