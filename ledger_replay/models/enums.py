"""Enumeration types for ledger entities."""

from enum import Enum


class TransferKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class AmendmentKind(str, Enum):
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


class DisputeStatus(str, Enum):
    NORMAL = "NORMAL"
    DISPUTED = "DISPUTED"
    RESOLVED = "RESOLVED"
    CHARGED_BACK = "CHARGED_BACK"


class ProcessingError(str, Enum):
    """Reason a well-formed transaction was rejected by the ledger."""

    DUPLICATE_TRANSACTION = "DUPLICATE_TRANSACTION"
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    UNKNOWN_TRANSACTION = "UNKNOWN_TRANSACTION"
    CLIENT_MISMATCH = "CLIENT_MISMATCH"
    TRANSACTION_NOT_DISPUTED = "TRANSACTION_NOT_DISPUTED"
