"""Shared serialization utilities for sinks."""

from decimal import Decimal

from ledger_replay.models import AccountSnapshot

ACCOUNT_COLUMNS = ("client", "available", "held", "total", "locked")


def format_amount(value: Decimal) -> str:
    """Render an amount in plain notation without trailing zeros.

    ``Decimal("12.80")`` becomes ``"12.8"``, ``Decimal("15.0")`` becomes
    ``"15"`` and negative zero becomes ``"0"``.
    """
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def snapshot_to_row(snapshot: AccountSnapshot) -> dict[str, str]:
    """Convert an account snapshot to an output row."""
    return {
        "client": str(snapshot.client),
        "available": format_amount(snapshot.available),
        "held": format_amount(snapshot.held),
        "total": format_amount(snapshot.total),
        "locked": "true" if snapshot.locked else "false",
    }

