"""In-memory ledger state."""

from ledger_replay.store.ledger import Ledger

__all__ = ["Ledger"]
