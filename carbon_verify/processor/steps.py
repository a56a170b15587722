from carbon_verify.extraction.adapter import ExtractionAdapter
from carbon_verify.processor.exceptions import ProcessorError
from carbon_verify.processor.pipeline import PipelineContext, PipelineStep

_PDF_SIGNATURE = b"%PDF-"


class AnalyzeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        file = context.file
        if not file.data:
            raise ProcessorError(f"{file.name} is empty")
        if file.is_pdf and not file.data.startswith(_PDF_SIGNATURE):
            context.log.warning(f"{file.name} is declared as PDF but lacks a PDF header")
        context.log.info(f"Analyzing {file.name} ({file.mime_type}, {file.size} bytes)")
        return context


class ExtractStep(PipelineStep):
    def __init__(self, adapter: ExtractionAdapter) -> None:
        self._adapter = adapter

    def run(self, context: PipelineContext) -> PipelineContext:
        context.outcome = self._adapter.extract(context.file)
        if not context.outcome.is_real:
            context.log.warning(
                f"Showing fallback data for {context.file.name}: {context.outcome.error}"
            )
        return context


class FinalizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.outcome is None:
            raise ValueError("PipelineContext.outcome must be set before finalizing")
        result = context.outcome.result
        context.log.info(
            f"Processed {len(result.documents)} documents "
            f"({context.outcome.kind.value}), fingerprint {result.fingerprint}"
        )
        return context
