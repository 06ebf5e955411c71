"""In-memory ledger that applies transactions to client accounts."""

import logging
from collections import Counter
from dataclasses import dataclass, field, replace
from decimal import localcontext

from ledger_replay.models import (
    AMOUNT_CONTEXT,
    Account,
    AccountSnapshot,
    Amendment,
    AmendmentKind,
    DisputeStatus,
    ProcessingError,
    Rejection,
    Transaction,
    Transfer,
    TransferKind,
    TransferRecord,
)

logger = logging.getLogger(__name__)


@dataclass
class Ledger:
    """Sequential interpreter of a transaction stream.

    The ledger is the only owner of account and transfer-record state.
    Callers feed transactions through :meth:`apply` in input order and read
    the result back as :class:`AccountSnapshot` copies.
    """

    _accounts: dict[int, Account] = field(default_factory=dict)
    _transfers: dict[int, TransferRecord] = field(default_factory=dict)
    rejections: list[Rejection] = field(default_factory=list)
    _sequence: int = 0
    _ignored: int = 0

    def apply(self, transaction: Transaction) -> ProcessingError | None:
        """Apply one transaction.

        Parameters
        ----------
        transaction : Transaction
            A validated transfer or amendment.

        Returns
        -------
        ProcessingError | None
            The rejection reason, or None when the transaction was applied
            or deliberately ignored. Rejections are also appended to
            :attr:`rejections`; ledger state is unchanged by them.
        """
        self._sequence += 1
        with localcontext(AMOUNT_CONTEXT):
            if isinstance(transaction, Transfer):
                error = self._apply_transfer(transaction)
            else:
                error = self._apply_amendment(transaction)

        if error is not None:
            self.rejections.append(Rejection(self._sequence, transaction, error))
        return error

    def _apply_transfer(self, transfer: Transfer) -> ProcessingError | None:
        if transfer.tx in self._transfers:
            return ProcessingError.DUPLICATE_TRANSACTION

        account = self._accounts.get(transfer.client)
        if account is not None and account.locked:
            return ProcessingError.ACCOUNT_LOCKED

        if transfer.kind == TransferKind.DEPOSIT:
            if account is None:
                account = self._accounts[transfer.client] = Account()
            account.available += transfer.amount
        else:
            if account is None or account.available < transfer.amount:
                return ProcessingError.INSUFFICIENT_FUNDS
            account.available -= transfer.amount

        self._transfers[transfer.tx] = TransferRecord(
            client=transfer.client,
            kind=transfer.kind,
            amount=transfer.amount,
        )
        return None

    def _apply_amendment(self, amendment: Amendment) -> ProcessingError | None:
        record = self._transfers.get(amendment.tx)
        if record is None:
            return ProcessingError.UNKNOWN_TRANSACTION
        if record.client != amendment.client:
            return ProcessingError.CLIENT_MISMATCH

        # Every stored record belongs to an account created by its transfer.
        account = self._accounts[record.client]

        if amendment.kind == AmendmentKind.DISPUTE:
            return self._dispute(amendment, record, account)
        if amendment.kind == AmendmentKind.RESOLVE:
            return self._resolve(record, account)
        return self._chargeback(record, account)

    def _dispute(
        self, amendment: Amendment, record: TransferRecord, account: Account
    ) -> ProcessingError | None:
        if record.status in (DisputeStatus.DISPUTED, DisputeStatus.CHARGED_BACK):
            self._ignored += 1
            logger.info(
                "[ %s ] ignored: transaction is already %s",
                amendment,
                record.status.value,
            )
            return None

        # Withdrawals are held the same way as deposits.
        account.available -= record.amount
        account.held += record.amount
        record.status = DisputeStatus.DISPUTED
        return None

    def _resolve(self, record: TransferRecord, account: Account) -> ProcessingError | None:
        if record.status != DisputeStatus.DISPUTED:
            return ProcessingError.TRANSACTION_NOT_DISPUTED

        account.held -= record.amount
        account.available += record.amount
        record.status = DisputeStatus.RESOLVED
        return None

    def _chargeback(self, record: TransferRecord, account: Account) -> ProcessingError | None:
        if record.status != DisputeStatus.DISPUTED:
            return ProcessingError.TRANSACTION_NOT_DISPUTED

        account.held -= record.amount
        account.locked = True
        record.status = DisputeStatus.CHARGED_BACK
        return None

    # Query methods
    def accounts(self) -> list[AccountSnapshot]:
        """Snapshot every account created during the run, in creation order."""
        return [AccountSnapshot.of(client, account) for client, account in self._accounts.items()]

    def get_account(self, client: int) -> AccountSnapshot | None:
        """Snapshot a single client's account, if it exists."""
        account = self._accounts.get(client)
        if account is None:
            return None
        return AccountSnapshot.of(client, account)

    def get_transfer(self, tx: int) -> TransferRecord | None:
        """Copy of the stored record for a transaction id, if accepted."""
        record = self._transfers.get(tx)
        return replace(record) if record is not None else None

    def summary(self) -> dict[str, int]:
        """Return counts of processed transactions and ledger entities."""
        rejected = len(self.rejections)
        result = {
            "applied": self._sequence - rejected - self._ignored,
            "ignored": self._ignored,
            "rejected": rejected,
            "accounts": len(self._accounts),
            "transfers": len(self._transfers),
        }
        for error, count in Counter(r.error for r in self.rejections).items():
            result[error.value] = count
        return result
