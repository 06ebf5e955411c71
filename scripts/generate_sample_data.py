#!/usr/bin/env python3
"""Generate a sample transactions CSV for manual validation.

Usage:
    python scripts/generate_sample_data.py
    python scripts/generate_sample_data.py --count 5000 --clients 50 --seed 7
"""

import argparse
import csv
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_replay.generators import TransactionStreamGenerator
from ledger_replay.models import Transfer
from ledger_replay.sinks.serialization import format_amount


def write_transactions(path: Path, count: int, clients: int, amendment_rate: float, seed: int) -> int:
    """Write a generated stream to ``path`` and return the row count."""
    generator = TransactionStreamGenerator(seed=seed)
    rows = 0

    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(["type", "client", "tx", "amount"])
        for transaction in generator.generate_stream(count, num_clients=clients, amendment_rate=amendment_rate):
            amount = format_amount(transaction.amount) if isinstance(transaction, Transfer) else ""
            writer.writerow([transaction.kind.value, transaction.client, transaction.tx, amount])
            rows += 1

    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a sample transactions CSV")
    parser.add_argument("--output", type=Path, default=Path("local/transactions.csv"))
    parser.add_argument("--count", type=int, default=1000, help="Number of records")
    parser.add_argument("--clients", type=int, default=20, help="Number of distinct clients")
    parser.add_argument("--amendment-rate", type=float, default=0.15)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    rows = write_transactions(args.output, args.count, args.clients, args.amendment_rate, args.seed)
    print(f"Saved {rows} records to {args.output}")


if __name__ == "__main__":
    main()
