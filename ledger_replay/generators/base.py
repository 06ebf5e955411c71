"""Base generator class for synthetic transaction data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from faker import Faker

from ledger_replay.models import Transaction


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides a Faker instance whose random state is private to the
    generator, so two generators built with the same seed produce the same
    data regardless of what else runs in the process.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    @abstractmethod
    def generate_stream(self, num_transactions: int, **kwargs) -> Iterator[Transaction]:
        """Yield ``num_transactions`` transactions in replay order."""
