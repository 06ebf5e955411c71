"""Domain models for transaction replay."""

from ledger_replay.models.account import (
    AMOUNT_CONTEXT,
    Account,
    AccountSnapshot,
    Rejection,
    TransferRecord,
)
from ledger_replay.models.enums import (
    AmendmentKind,
    DisputeStatus,
    ProcessingError,
    TransferKind,
)
from ledger_replay.models.transaction import (
    MAX_CLIENT_ID,
    MAX_TRANSACTION_ID,
    Amendment,
    Transaction,
    Transfer,
)

__all__ = [
    "AMOUNT_CONTEXT",
    "Account",
    "AccountSnapshot",
    "Amendment",
    "AmendmentKind",
    "DisputeStatus",
    "MAX_CLIENT_ID",
    "MAX_TRANSACTION_ID",
    "ProcessingError",
    "Rejection",
    "Transaction",
    "Transfer",
    "TransferKind",
    "TransferRecord",
]
