"""JSON file sink for exporting accounts to files."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from ledger_replay.models import AccountSnapshot
from ledger_replay.sinks.serialization import snapshot_to_row

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output accounts to a JSON file."""

    FILENAME = "accounts.json"

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._count = 0

    @property
    def file_path(self) -> Path:
        return self.output_dir / self.FILENAME

    def write_accounts(self, accounts: Iterable[AccountSnapshot]) -> None:
        """Write all accounts as a JSON list of rows."""
        data = [snapshot_to_row(snapshot) for snapshot in accounts]

        with open(self.file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        self._count = len(data)

    def close(self) -> None:
        """Log summary."""
        logger.info("JSON written to %s: %d accounts", self.file_path, self._count)
