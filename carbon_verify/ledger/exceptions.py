class LedgerError(Exception):
    """Base exception for simulated ledger errors."""


class LedgerCommitCancelledError(LedgerError):
    """Raised when a commit is cancelled before its record is produced."""
