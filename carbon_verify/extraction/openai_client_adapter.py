import base64

import httpx
import openai

from carbon_verify.extraction.client_base import BaseExtractionClient
from carbon_verify.extraction.exceptions import ExtractionError, ExtractionNetworkError
from carbon_verify.intake.models import UploadedFile
from carbon_verify.pdf.base import BasePdfExtractor
from carbon_verify.pdf.exceptions import PdfExtractionError


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat API.

    PDFs are attached as base64 ``file`` parts and images as ``image_url``
    data URLs. When a *pdf_extractor* is given, PDFs are converted to text
    locally instead, for providers that cannot read PDF attachments.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        pdf_extractor: BasePdfExtractor | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._pdf_extractor = pdf_extractor

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        file: UploadedFile,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "user", "content": self._build_content(prompt, file)},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ExtractionError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ExtractionError("AI returned empty response")
        return content

    def _build_content(self, prompt: str, file: UploadedFile) -> list[dict[str, object]]:
        text_part: dict[str, object] = {"type": "text", "text": prompt}
        if file.is_pdf and self._pdf_extractor is not None:
            try:
                document_text = self._pdf_extractor.extract(file.data)
            except PdfExtractionError as exc:
                raise ExtractionError(f"Could not read {file.name}: {exc}") from exc
            text_part["text"] = f"{prompt}\n\nDocument text:\n{document_text}"
            return [text_part]

        encoded = base64.b64encode(file.data).decode("ascii")
        data_url = f"data:{file.mime_type};base64,{encoded}"
        if file.is_image:
            return [text_part, {"type": "image_url", "image_url": {"url": data_url}}]
        return [
            text_part,
            {"type": "file", "file": {"filename": file.name, "file_data": data_url}},
        ]
