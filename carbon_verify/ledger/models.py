from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatedLedgerRecord:
    """Fabricated transaction standing in for an on-chain write."""

    signature: str
    block_height: int
    timestamp: str
    fee: float
    status: str
    document_hash: str
    documents_count: int

    def to_dict(self) -> dict[str, object]:
        return {
            "signature": self.signature,
            "blockHeight": self.block_height,
            "timestamp": self.timestamp,
            "fee": self.fee,
            "status": self.status,
            "documentHash": self.document_hash,
            "documentsCount": self.documents_count,
        }
