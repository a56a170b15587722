"""Simulated ledger commit.

Nothing here talks to a chain. The record is fabricated after a delay so the
review flow can show a transaction; the explorer link will not resolve.
"""

import json
import random
import string
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from carbon_verify.config.settings import Settings
from carbon_verify.extraction.models import OCRResult
from carbon_verify.ledger.exceptions import LedgerCommitCancelledError
from carbon_verify.ledger.models import SimulatedLedgerRecord
from carbon_verify.logging.logger import Log
from carbon_verify.processor.cancellation import CancellationToken

_SIGNATURE_ALPHABET = string.digits + string.ascii_lowercase
_SIGNATURE_CHUNK = 11
CONFIRMED = "confirmed"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SimulatedLedger:
    def __init__(
        self,
        *,
        delay_seconds: float,
        base_block_height: int,
        block_height_jitter: int,
        fee: float,
        explorer_url_template: str,
        network: str,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._base_block_height = base_block_height
        self._block_height_jitter = max(1, block_height_jitter)
        self._fee = fee
        self._explorer_url_template = explorer_url_template
        self.network = network
        self._rng = rng or random.Random()
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, rng: random.Random | None = None) -> "SimulatedLedger":
        return cls(
            delay_seconds=settings.ledger_commit_delay_seconds,
            base_block_height=settings.ledger_base_block_height,
            block_height_jitter=settings.ledger_block_height_jitter,
            fee=settings.ledger_fee,
            explorer_url_template=settings.ledger_explorer_url_template,
            network=settings.ledger_network,
            rng=rng,
        )

    def commit(
        self,
        result: OCRResult,
        token: CancellationToken | None = None,
    ) -> SimulatedLedgerRecord:
        """Pretend to store *result*'s fingerprint and return the record.

        Raises:
            LedgerCommitCancelledError: if *token* is cancelled during the delay.
        """
        token = token or CancellationToken()
        Log.info(f"Submitting fingerprint {result.fingerprint} to {self.network}")
        if token.wait(self._delay_seconds):
            Log.warning("Ledger commit cancelled before confirmation")
            raise LedgerCommitCancelledError("Ledger commit was cancelled")

        record = SimulatedLedgerRecord(
            signature=self._signature(),
            block_height=self._base_block_height + self._rng.randrange(self._block_height_jitter),
            timestamp=self._clock().isoformat(),
            fee=self._fee,
            status=CONFIRMED,
            document_hash=result.fingerprint,
            documents_count=len(result.documents),
        )
        Log.info(f"Ledger commit confirmed at block {record.block_height}: {record.signature}")
        return record

    def explorer_url(self, record: SimulatedLedgerRecord) -> str:
        return self._explorer_url_template.format(signature=record.signature)

    def _signature(self) -> str:
        return "".join(
            self._rng.choice(_SIGNATURE_ALPHABET) for _ in range(_SIGNATURE_CHUNK * 2)
        )


def build_proof(
    record: SimulatedLedgerRecord,
    result: OCRResult,
    network: str,
) -> dict[str, object]:
    """Downloadable proof of the (simulated) commit."""
    return {
        "transactionSignature": record.signature,
        "blockHeight": record.block_height,
        "timestamp": record.timestamp,
        "documentHash": result.fingerprint,
        "documents": [
            {"name": doc.name, "fieldsExtracted": len(doc.fields)}
            for doc in result.documents
        ],
        "network": network,
        "status": record.status.capitalize(),
    }


def write_proof(proof: dict[str, object], directory: Path) -> Path:
    """Write *proof* as ``blockchain-proof-<signature prefix>.json``."""
    signature = str(proof["transactionSignature"])
    path = directory / f"blockchain-proof-{signature[:8]}.json"
    directory.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(proof, indent=2), encoding="utf-8")
    Log.info(f"Proof written to {path}")
    return path
