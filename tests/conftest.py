"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator
from decimal import Decimal

import pytest

from ledger_replay.generators import TransactionStreamGenerator
from ledger_replay.models import Amendment, AmendmentKind, Transfer, TransferKind
from ledger_replay.store import Ledger

ENV_VARS = [
    "CSV_DELIMITER",
    "OUTPUT_FORMAT",
    "OUTPUT_PATH",
    "OUTPUT_DIR",
    "PRETTY_JSON",
    "SORT_BY_CLIENT",
    "KAFKA_BOOTSTRAP_SERVERS",
    "KAFKA_ACKS",
    "KAFKA_TOPIC",
    "LOG_LEVEL",
    "LOG_FORMAT",
]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ledger() -> Ledger:
    """Create a fresh ledger for each test."""
    return Ledger()


@pytest.fixture
def generator(seed: int) -> TransactionStreamGenerator:
    """Seeded transaction generator."""
    return TransactionStreamGenerator(seed=seed)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _deposit(client: int, tx: int, amount: str) -> Transfer:
    return Transfer(TransferKind.DEPOSIT, client, tx, Decimal(amount))


def _withdrawal(client: int, tx: int, amount: str) -> Transfer:
    return Transfer(TransferKind.WITHDRAWAL, client, tx, Decimal(amount))


def _amend(kind: AmendmentKind, client: int, tx: int) -> Amendment:
    return Amendment(kind, client, tx)


@pytest.fixture
def example_stream() -> list:
    """The documented 16-record example stream."""
    return [
        _deposit(23, 1, "10"),
        _amend(AmendmentKind.CHARGEBACK, 23, 1),
        _deposit(24, 2, "15"),
        _deposit(42, 3, "12.5"),
        _withdrawal(22, 4, "7"),
        _withdrawal(42, 5, "2.25"),
        _deposit(23, 6, "8"),
        _withdrawal(23, 7, "2"),
        _amend(AmendmentKind.DISPUTE, 23, 1),
        _deposit(24, 8, "16"),
        _amend(AmendmentKind.DISPUTE, 42, 5),
        _amend(AmendmentKind.CHARGEBACK, 42, 5),
        _amend(AmendmentKind.DISPUTE, 24, 2),
        _amend(AmendmentKind.RESOLVE, 23, 1),
        _deposit(42, 9, "6.5"),
        _withdrawal(24, 10, "3.2"),
    ]


EXAMPLE_CSV = """type, client, tx, amount
deposit, 23, 1, 10
chargeback, 23, 1,
deposit, 24, 2, 15
deposit, 42, 3, 12.5
withdrawal, 22, 4, 7
withdrawal, 42, 5, 2.25
deposit, 23, 6, 8
withdrawal, 23, 7, 2
dispute, 23, 1,
deposit, 24, 8, 16
dispute, 42, 5,
chargeback, 42, 5,
dispute, 24, 2,
resolve, 23, 1,
deposit, 42, 9, 6.5
withdrawal, 24, 10, 3.2
"""


@pytest.fixture
def example_csv() -> str:
    """The documented example stream as CSV text."""
    return EXAMPLE_CSV


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore root logger handlers changed by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("ledger_replay").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("ledger_replay").setLevel(package_level)
