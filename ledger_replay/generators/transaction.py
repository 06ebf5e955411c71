"""Synthetic transaction stream generator."""

from collections.abc import Iterator
from decimal import Decimal

from ledger_replay.generators.base import BaseGenerator
from ledger_replay.models import Amendment, AmendmentKind, Transaction, Transfer, TransferKind


class TransactionStreamGenerator(BaseGenerator):
    """Build transactions with sequential ids and remembered owners.

    Transfers get ids 1, 2, 3, ... in creation order. Amendments are built
    from an id alone; the owning client is looked up from the transfer that
    introduced the id.
    """

    TRANSFER_KINDS = [TransferKind.DEPOSIT, TransferKind.WITHDRAWAL]
    TRANSFER_WEIGHTS = [0.6, 0.4]

    AMENDMENT_KINDS = [AmendmentKind.DISPUTE, AmendmentKind.RESOLVE, AmendmentKind.CHARGEBACK]
    AMENDMENT_WEIGHTS = [0.5, 0.3, 0.2]

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        super().__init__(seed, locale)
        self.transaction_count = 0
        self.clients_of_transactions: dict[int, int] = {}

    def _transfer(self, kind: TransferKind, client: int, amount: Decimal) -> Transfer:
        self.transaction_count += 1
        tx = self.transaction_count
        self.clients_of_transactions[tx] = client
        return Transfer(kind=kind, client=client, tx=tx, amount=amount)

    def _amendment(self, kind: AmendmentKind, tx: int) -> Amendment:
        if tx not in self.clients_of_transactions:
            raise KeyError(f"Unknown transaction {tx}")
        return Amendment(kind=kind, client=self.clients_of_transactions[tx], tx=tx)

    def deposit(self, client: int, amount: Decimal) -> Transfer:
        """Create a deposit with the next transaction id."""
        return self._transfer(TransferKind.DEPOSIT, client, amount)

    def withdrawal(self, client: int, amount: Decimal) -> Transfer:
        """Create a withdrawal with the next transaction id."""
        return self._transfer(TransferKind.WITHDRAWAL, client, amount)

    def dispute(self, tx: int) -> Amendment:
        """Dispute a transaction created by this generator."""
        return self._amendment(AmendmentKind.DISPUTE, tx)

    def resolve(self, tx: int) -> Amendment:
        """Resolve a transaction created by this generator."""
        return self._amendment(AmendmentKind.RESOLVE, tx)

    def chargeback(self, tx: int) -> Amendment:
        """Charge back a transaction created by this generator."""
        return self._amendment(AmendmentKind.CHARGEBACK, tx)

    def random_amount(self) -> Decimal:
        """Positive amount with four decimal places, up to 500."""
        return Decimal(self.fake.random_int(min=1, max=5_000_000)).scaleb(-4)

    def generate_stream(
        self,
        num_transactions: int,
        num_clients: int = 10,
        amendment_rate: float = 0.15,
    ) -> Iterator[Transaction]:
        """Generate a mixed stream of transfers and amendments.

        Parameters
        ----------
        num_transactions : int
            Number of records to yield.
        num_clients : int
            Client ids are drawn from ``1..num_clients``.
        amendment_rate : float
            Probability (0.0 to 1.0) that a record amends an earlier transfer
            once at least one transfer exists.

        Returns
        -------
        Iterator[Transaction]
            Deterministic for a given seed.
        """
        rng = self.fake.random

        for _ in range(num_transactions):
            if self.clients_of_transactions and rng.random() < amendment_rate:
                kind = rng.choices(self.AMENDMENT_KINDS, weights=self.AMENDMENT_WEIGHTS, k=1)[0]
                tx = self.fake.random_int(min=1, max=self.transaction_count)
                yield self._amendment(kind, tx)
                continue

            kind = rng.choices(self.TRANSFER_KINDS, weights=self.TRANSFER_WEIGHTS, k=1)[0]
            client = self.fake.random_int(min=1, max=num_clients)
            yield self._transfer(kind, client, self.random_amount())
