"""Drive a transaction stream through a ledger."""

from collections.abc import Iterable

from ledger_replay.logging import get_logger
from ledger_replay.models import Transaction
from ledger_replay.store import Ledger

logger = get_logger(__name__)


def replay(transactions: Iterable[Transaction], ledger: Ledger | None = None) -> Ledger:
    """Apply every transaction in order, logging rejections without stopping.

    Parameters
    ----------
    transactions : Iterable[Transaction]
        Validated transactions in input order. Consumed once.
    ledger : Ledger | None
        Ledger to apply to. A fresh one is created when omitted.

    Returns
    -------
    Ledger
        The ledger holding the final state.
    """
    if ledger is None:
        ledger = Ledger()

    for transaction in transactions:
        error = ledger.apply(transaction)
        if error is not None:
            logger.error("[ %s ] failed with error %s", transaction, error.value)

    summary = ledger.summary()
    logger.info(
        "Replay complete: applied=%d, ignored=%d, rejected=%d, accounts=%d",
        summary["applied"],
        summary["ignored"],
        summary["rejected"],
        summary["accounts"],
    )
    return ledger
