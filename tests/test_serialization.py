"""Tests for shared serialization utilities."""

from decimal import Decimal

import pytest

from ledger_replay.models import AccountSnapshot
from ledger_replay.sinks.serialization import format_amount, snapshot_to_row


class TestFormatAmount:
    """Tests for format_amount."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("12.80", "12.8"),
            ("15.0", "15"),
            ("15", "15"),
            ("0.0010", "0.001"),
            ("0.0000", "0"),
            ("-0", "0"),
            ("-7.50", "-7.5"),
            ("1E+2", "100"),
            ("27.8", "27.8"),
            ("0.12345678901234567890123456789", "0.12345678901234567890123456789"),
            ("123456789012345678901234567890.5", "123456789012345678901234567890.5"),
        ],
    )
    def test_format(self, value: str, expected: str) -> None:
        assert format_amount(Decimal(value)) == expected


class TestSnapshotToRow:
    """Tests for snapshot_to_row."""

    def test_row(self) -> None:
        snapshot = AccountSnapshot(24, Decimal("12.80"), Decimal("15"), Decimal("27.80"), False)

        assert snapshot_to_row(snapshot) == {
            "client": "24",
            "available": "12.8",
            "held": "15",
            "total": "27.8",
            "locked": "false",
        }

    def test_locked(self) -> None:
        snapshot = AccountSnapshot(42, Decimal("8"), Decimal("0"), Decimal("8"), True)
        assert snapshot_to_row(snapshot)["locked"] == "true"

