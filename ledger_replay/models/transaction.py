"""Transaction models: transfers move money, amendments act on transfers."""

from dataclasses import dataclass
from decimal import Decimal

from ledger_replay.exceptions import MissingAmountError, NegativeAmountError
from ledger_replay.models.enums import AmendmentKind, TransferKind

MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1


@dataclass(frozen=True)
class Transfer:
    """Deposit into or withdrawal from a client's available balance.

    Raises
    ------
    MissingAmountError
        If ``amount`` is None.
    NegativeAmountError
        If ``amount`` is below zero.
    """

    kind: TransferKind
    client: int
    tx: int
    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount is None:
            raise MissingAmountError(f"{self.kind.value} {self.tx} has no amount")
        if self.amount < 0:
            raise NegativeAmountError(
                f"{self.kind.value} {self.tx} has negative amount {self.amount}"
            )

    def __str__(self) -> str:
        return f"{self.kind.value}, client: {self.client}, tx: {self.tx}, amount: {self.amount}"


@dataclass(frozen=True)
class Amendment:
    """Dispute, resolve or chargeback of a previously accepted transfer."""

    kind: AmendmentKind
    client: int
    tx: int

    def __str__(self) -> str:
        return f"{self.kind.value}, client: {self.client}, tx: {self.tx}"


Transaction = Transfer | Amendment
