from collections.abc import Sequence
from dataclasses import dataclass

from carbon_verify.config.settings import Settings
from carbon_verify.processor.exceptions import InvalidStagePlanError


@dataclass(frozen=True)
class ProcessingStage:
    """One step of visible progress; the delay runs after the stage's work."""

    label: str
    progress_percent: int
    delay_seconds: float = 0.0


ANALYZING = "Analyzing PDF structure..."
EXTRACTING = "Extracting document data..."
GENERATING = "Generating hash..."
FINALIZING = "Finalizing results..."


def default_stages(settings: Settings) -> tuple[ProcessingStage, ...]:
    return (
        ProcessingStage(ANALYZING, 20, settings.stage_delay_analyzing_seconds),
        ProcessingStage(EXTRACTING, 50, settings.stage_delay_extracting_seconds),
        ProcessingStage(GENERATING, 80, settings.stage_delay_generating_seconds),
        ProcessingStage(FINALIZING, 100, settings.stage_delay_finalizing_seconds),
    )


def validate_stages(stages: Sequence[ProcessingStage]) -> None:
    """Reject plans that are empty, regress, leave 0..100, or stop short of 100.

    Raises:
        InvalidStagePlanError: describing the first violation found.
    """
    if not stages:
        raise InvalidStagePlanError("Stage plan must contain at least one stage")
    previous = 0
    for stage in stages:
        if not 0 <= stage.progress_percent <= 100:
            raise InvalidStagePlanError(
                f"Stage '{stage.label}' progress {stage.progress_percent} is outside 0..100"
            )
        if stage.progress_percent < previous:
            raise InvalidStagePlanError(
                f"Stage '{stage.label}' progress {stage.progress_percent} "
                f"is below the previous stage ({previous})"
            )
        if stage.delay_seconds < 0:
            raise InvalidStagePlanError(f"Stage '{stage.label}' has a negative delay")
        previous = stage.progress_percent
    if stages[-1].progress_percent != 100:
        raise InvalidStagePlanError("Terminal stage must reach 100")
