"""Account and transfer-history models owned by the ledger."""

from dataclasses import dataclass, field
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal

from ledger_replay.models.enums import DisputeStatus, ProcessingError, TransferKind
from ledger_replay.models.transaction import Transaction

# Exact arithmetic: balances never round to the default 28 significant digits.
AMOUNT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


@dataclass
class Account:
    """Live balance of a single client.

    ``total`` is derived, so ``available + held == total`` always holds.
    """

    available: Decimal = field(default_factory=Decimal)
    held: Decimal = field(default_factory=Decimal)
    locked: bool = False

    @property
    def total(self) -> Decimal:
        """Available plus held funds."""
        return AMOUNT_CONTEXT.add(self.available, self.held)


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only copy of an account handed out to callers."""

    client: int
    available: Decimal
    held: Decimal
    total: Decimal
    locked: bool

    @classmethod
    def of(cls, client: int, account: Account) -> "AccountSnapshot":
        return cls(
            client=client,
            available=account.available,
            held=account.held,
            total=account.total,
            locked=account.locked,
        )


@dataclass
class TransferRecord:
    """Stored history of an accepted deposit or withdrawal."""

    client: int
    kind: TransferKind
    amount: Decimal
    status: DisputeStatus = DisputeStatus.NORMAL


@dataclass(frozen=True)
class Rejection:
    """A transaction the ledger refused, with its 1-based stream position."""

    sequence: int
    transaction: Transaction
    error: ProcessingError
