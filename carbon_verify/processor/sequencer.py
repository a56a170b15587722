from collections.abc import Callable, Sequence
from dataclasses import dataclass

from carbon_verify.processor.exceptions import ProcessingCancelledError
from carbon_verify.processor.pipeline import PipelineContext, PipelineStep
from carbon_verify.processor.stages import ProcessingStage, validate_stages


@dataclass(frozen=True)
class ProgressSnapshot:
    label: str
    progress_percent: int
    index: int
    total: int


ProgressListener = Callable[[ProgressSnapshot], None]


@dataclass(frozen=True)
class SequencedStage:
    """A visible stage and the pipeline step that does its work, if any."""

    stage: ProcessingStage
    step: PipelineStep | None = None


class StageSequencer:
    """Advances through stages one at a time, publishing progress on each move.

    Each stage publishes its label and percentage, runs its step, then waits
    its delay on the run's cancellation token. Cancelling the token aborts the
    remaining stages with ProcessingCancelledError.
    """

    def __init__(self, listener: ProgressListener | None = None) -> None:
        self._listener = listener
        self._label = ""
        self._progress = 0

    @property
    def current_label(self) -> str:
        return self._label

    @property
    def progress_percent(self) -> int:
        return self._progress

    def run(
        self,
        plan: Sequence[SequencedStage],
        context: PipelineContext,
    ) -> PipelineContext:
        validate_stages([item.stage for item in plan])
        try:
            for index, item in enumerate(plan):
                context.token.raise_if_cancelled()
                self._publish(item.stage, index, len(plan))
                context.log.info(f"{item.stage.label} ({item.stage.progress_percent}%)")
                if item.step is not None:
                    context = item.step.run(context)
                if context.token.wait(item.stage.delay_seconds):
                    raise ProcessingCancelledError(
                        f"Processing run cancelled during '{item.stage.label}'"
                    )
                context.completed_stages.append(item.stage.label)
            return context
        finally:
            self._label = ""
            self._progress = 0

    def _publish(self, stage: ProcessingStage, index: int, total: int) -> None:
        self._label = stage.label
        self._progress = stage.progress_percent
        if self._listener is not None:
            self._listener(
                ProgressSnapshot(
                    label=stage.label,
                    progress_percent=stage.progress_percent,
                    index=index,
                    total=total,
                )
            )
