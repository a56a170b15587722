from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from carbon_verify.extraction.models import ExtractionOutcome
from carbon_verify.intake.models import UploadedFile
from carbon_verify.logging.logger import RunLog
from carbon_verify.processor.cancellation import CancellationToken


@dataclass(slots=True)
class PipelineContext:
    run_id: str
    file: UploadedFile
    token: CancellationToken
    log: RunLog
    outcome: ExtractionOutcome | None = None
    completed_stages: list[str] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
