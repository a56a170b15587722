import uuid
from collections.abc import Sequence

from carbon_verify.config.settings import Settings
from carbon_verify.extraction.adapter import ExtractionAdapter
from carbon_verify.extraction.factory import ExtractionAdapterFactory
from carbon_verify.extraction.models import ExtractionOutcome
from carbon_verify.intake.file_intake import FileIntake
from carbon_verify.intake.models import IntakePolicy, UploadedFile
from carbon_verify.logging.logger import Log
from carbon_verify.processor.cancellation import CancellationToken
from carbon_verify.processor.exceptions import ProcessingInProgressError
from carbon_verify.processor.pipeline import PipelineContext
from carbon_verify.processor.sequencer import (
    ProgressListener,
    SequencedStage,
    StageSequencer,
)
from carbon_verify.processor.stages import ProcessingStage, default_stages
from carbon_verify.processor.steps import AnalyzeStep, ExtractStep, FinalizeStep


class DocumentProcessor:
    """Orchestrates the document intake pipeline.

    Pipeline: accept -> analyze -> extract -> (hash stage) -> finalize.
    At most one run is in flight per instance.
    """

    def __init__(
        self,
        intake: FileIntake,
        plan: Sequence[SequencedStage],
        listener: ProgressListener | None = None,
    ) -> None:
        self._intake = intake
        self._plan = tuple(plan)
        self._sequencer = StageSequencer(listener)
        self._running = False

    @property
    def intake(self) -> FileIntake:
        return self._intake

    @property
    def sequencer(self) -> StageSequencer:
        return self._sequencer

    @property
    def is_running(self) -> bool:
        return self._running

    def process(
        self,
        file: UploadedFile | None = None,
        token: CancellationToken | None = None,
    ) -> ExtractionOutcome:
        """Run the pipeline for *file*, or for the file already held by intake.

        Raises:
            InvalidFileTypeError: if *file* is rejected; no stage starts.
            MissingFileError: if no file is given or held.
            ProcessingInProgressError: if another run is in flight.
            ProcessingCancelledError: if *token* is cancelled mid-run.
        """
        if self._running:
            raise ProcessingInProgressError("A processing run is already in flight")
        if file is not None:
            self._intake.accept(file)
        uploaded = self._intake.require()

        run_id = uuid.uuid4().hex[:8]
        context = PipelineContext(
            run_id=run_id,
            file=uploaded,
            token=token or CancellationToken(),
            log=Log.for_run(run_id),
        )
        self._running = True
        try:
            context = self._sequencer.run(self._plan, context)
        finally:
            self._running = False
        if context.outcome is None:
            raise ValueError("Stage plan finished without an extraction step")
        return context.outcome


def build_plan(
    stages: Sequence[ProcessingStage],
    adapter: ExtractionAdapter,
) -> list[SequencedStage]:
    """Bind the four default stages to their steps; the hash stage has no step."""
    analyzing, extracting, generating, finalizing = stages
    return [
        SequencedStage(analyzing, AnalyzeStep()),
        SequencedStage(extracting, ExtractStep(adapter)),
        SequencedStage(generating),
        SequencedStage(finalizing, FinalizeStep()),
    ]


def build_processor(
    settings: Settings,
    policy: IntakePolicy = IntakePolicy.WHOLE_DOCUMENT,
    listener: ProgressListener | None = None,
) -> DocumentProcessor:
    """Build a DocumentProcessor with the configured extraction adapter."""
    adapter = ExtractionAdapterFactory.create(settings)
    return DocumentProcessor(
        intake=FileIntake(policy),
        plan=build_plan(default_stages(settings), adapter),
        listener=listener,
    )
