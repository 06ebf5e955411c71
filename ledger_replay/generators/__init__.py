"""Synthetic data generators."""

from ledger_replay.generators.transaction import TransactionStreamGenerator

__all__ = ["TransactionStreamGenerator"]
