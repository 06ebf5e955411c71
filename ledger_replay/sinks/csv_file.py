"""CSV sink writing the final account table."""

import csv
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from ledger_replay.models import AccountSnapshot
from ledger_replay.sinks.serialization import ACCOUNT_COLUMNS, snapshot_to_row

logger = logging.getLogger(__name__)


class CsvSink:
    """Output accounts as CSV rows to a stream or file."""

    def __init__(
        self,
        output: TextIO | str | Path | None = None,
        sort_by_client: bool = False,
    ) -> None:
        """Initialize CSV sink.

        Parameters
        ----------
        output : TextIO | str | Path | None
            Open text stream or file path. Defaults to stdout.
        sort_by_client : bool
            Write rows in ascending client order instead of ledger order.
        """
        if output is None:
            output = sys.stdout
        if isinstance(output, (str, Path)):
            self.path: Path | None = Path(output)
            self.stream = self.path.open("w", encoding="utf-8", newline="")
        else:
            self.path = None
            self.stream = output
        self.sort_by_client = sort_by_client
        self._count = 0

    def write_accounts(self, accounts: Iterable[AccountSnapshot]) -> None:
        """Write a header and one row per account."""
        if self.sort_by_client:
            accounts = sorted(accounts, key=lambda snapshot: snapshot.client)

        writer = csv.DictWriter(self.stream, fieldnames=ACCOUNT_COLUMNS, lineterminator="\n")
        writer.writeheader()
        for snapshot in accounts:
            writer.writerow(snapshot_to_row(snapshot))
            self._count += 1
        self.stream.flush()

    def close(self) -> None:
        """Close the file if this sink opened it."""
        if self.path is not None:
            self.stream.close()
            logger.info("CSV written to %s: %d accounts", self.path, self._count)
