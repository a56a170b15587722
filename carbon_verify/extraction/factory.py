from typing import ClassVar

from carbon_verify.config.settings import Settings
from carbon_verify.extraction.adapter import ExtractionAdapter
from carbon_verify.extraction.client_base import BaseExtractionClient
from carbon_verify.extraction.example_client_adapter import ExampleClientAdapter
from carbon_verify.extraction.exceptions import ExtractionConfigError
from carbon_verify.extraction.openai_client_adapter import OpenAIClientAdapter
from carbon_verify.pdf.base import BasePdfExtractor
from carbon_verify.pdf.pdfplumber_adapter import PdfPlumberAdapter
from carbon_verify.pdf.pymupdf_adapter import PyMuPdfAdapter


class ExtractionAdapterFactory:
    """Creates the configured extraction adapter and its provider client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama", "openai_compatible"})
    PDF_ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    INPUT_MODES: ClassVar[tuple[str, ...]] = ("file", "text")

    @classmethod
    def create(cls, settings: Settings) -> ExtractionAdapter:
        """Create an extraction adapter from application settings.

        Raises:
            ExtractionConfigError: if the provider is unknown or lacks credentials.
        """
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return ExtractionAdapter(client=ExampleClientAdapter(), model="example")
        return ExtractionAdapter(
            client=cls.create_client(provider, settings),
            model=settings.extraction_model_name,
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def create_client(cls, provider: str, settings: Settings) -> BaseExtractionClient:
        base_url = cls._resolve_base_url(provider, settings)
        api_key = settings.extraction_api_key.strip()
        if not api_key:
            if provider not in cls.KEYLESS_PROVIDERS:
                raise ExtractionConfigError(
                    f"EXTRACTION_API_KEY is required for extraction_provider={provider}"
                )
            # The SDK refuses an empty key even for servers that ignore it.
            api_key = "unused"
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=base_url,
            pdf_extractor=cls._resolve_pdf_extractor(settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_base_url.strip()
            if not url:
                raise ExtractionConfigError(
                    "extraction_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ExtractionConfigError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_pdf_extractor(cls, settings: Settings) -> BasePdfExtractor | None:
        mode = settings.extraction_input_mode.lower()
        if mode not in cls.INPUT_MODES:
            raise ExtractionConfigError(
                f"Unknown extraction input mode '{mode}'. Choose from: {list(cls.INPUT_MODES)}"
            )
        if mode == "file":
            return None
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ExtractionConfigError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
