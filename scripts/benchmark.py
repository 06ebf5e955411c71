#!/usr/bin/env python3
"""Benchmark stream generation and ledger throughput.

Measures:
- Synthetic stream generation rate (records/sec)
- Ledger apply rate (records/sec)
- Peak memory after replay

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --scale 1000000 --clients 5000
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_replay.generators import TransactionStreamGenerator
from ledger_replay.store import Ledger

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def get_memory_mb() -> float:
    """Get peak process memory usage in MB."""
    try:
        import resource
    except ImportError:  # not available on Windows
        return 0.0
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return usage.ru_maxrss / 1024  # Linux reports in KiB


def main() -> None:
    """Run benchmarks."""
    parser = argparse.ArgumentParser(description="Benchmark ledger-replay performance")
    parser.add_argument("--scale", type=int, default=100_000, help="Number of records (default: 100000)")
    parser.add_argument("--clients", type=int, default=1000, help="Number of distinct clients")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    print("=" * 60)
    print(f"  ledger-replay Benchmark  |  scale={args.scale:,}  seed={args.seed}")
    print("=" * 60)

    print("\n[1] Stream Generation")
    generator = TransactionStreamGenerator(seed=args.seed)
    t0 = time.perf_counter()
    transactions = list(generator.generate_stream(args.scale, num_clients=args.clients))
    t_gen = time.perf_counter() - t0
    print(f"  Records:       {len(transactions):>10,} in {t_gen:.2f}s  ({len(transactions) / max(t_gen, 0.001):,.0f}/sec)")

    print("\n[2] Ledger Apply")
    ledger = Ledger()
    t0 = time.perf_counter()
    for transaction in transactions:
        ledger.apply(transaction)
    t_apply = time.perf_counter() - t0
    print(f"  Records:       {len(transactions):>10,} in {t_apply:.2f}s  ({len(transactions) / max(t_apply, 0.001):,.0f}/sec)")

    for key, value in ledger.summary().items():
        print(f"  {key:<26} {value:>10,}")
    print(f"  Peak memory:   {get_memory_mb():>10,.1f} MB")

    print("\n" + "=" * 60)
    print("  Benchmark complete")
    print("=" * 60)


if __name__ == "__main__":
    main()
