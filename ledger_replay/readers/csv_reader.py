"""CSV reader turning raw transaction rows into validated transactions.

Expected header (column order is free, names are trimmed and
case-insensitive)::

    type, client, tx, amount

Rows may be shorter or longer than the header, so trailing commas and a
missing ``amount`` column on amendments are accepted. Files are UTF-8 with an
optional byte order mark; a row holding bytes that are not valid UTF-8 is
reported as malformed like any other bad row.
"""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from os import PathLike
from pathlib import Path
from typing import TextIO

from ledger_replay.exceptions import InputFormatError, MalformedRecordError
from ledger_replay.models import (
    MAX_CLIENT_ID,
    MAX_TRANSACTION_ID,
    Amendment,
    AmendmentKind,
    Transaction,
    Transfer,
    TransferKind,
)

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("type", "client", "tx")
AMOUNT_COLUMN = "amount"

_DIGITS = re.compile(r"^\d+$")
_AMOUNT = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")
_BOM = "\ufeff"


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading one row: exactly one of transaction or error is set."""

    line: int
    transaction: Transaction | None = None
    error: InputFormatError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_id(value: str, name: str, maximum: int) -> int:
    if not _DIGITS.match(value):
        raise MalformedRecordError(f"invalid {name} id {value!r}")
    parsed = int(value)
    if parsed > maximum:
        raise MalformedRecordError(f"{name} id {parsed} is out of range")
    return parsed


def _parse_amount(value: str | None) -> Decimal | None:
    if value is None or value == "":
        return None
    if not _AMOUNT.match(value):
        raise MalformedRecordError(f"invalid amount {value!r}")
    return Decimal(value)


def _undecodable(values: list[str]) -> bool:
    # surrogateescape maps invalid UTF-8 bytes to lone surrogates
    try:
        for value in values:
            value.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def parse_record(fields: dict[str, str | None]) -> Transaction:
    """Build a transaction from trimmed column values.

    Parameters
    ----------
    fields : dict[str, str | None]
        Column name to value. ``amount`` may be absent or None.

    Returns
    -------
    Transaction
        The validated transfer or amendment.

    Raises
    ------
    InputFormatError
        If the record is malformed or a transfer's amount is missing or
        negative.
    """
    raw_type = (fields.get("type") or "").lower()
    for column in REQUIRED_COLUMNS:
        if not fields.get(column):
            raise MalformedRecordError(f"missing {column}")

    client = _parse_id(fields["client"], "client", MAX_CLIENT_ID)
    tx = _parse_id(fields["tx"], "transaction", MAX_TRANSACTION_ID)
    amount = _parse_amount(fields.get(AMOUNT_COLUMN))

    try:
        transfer_kind = TransferKind(raw_type)
    except ValueError:
        transfer_kind = None
    if transfer_kind is not None:
        return Transfer(kind=transfer_kind, client=client, tx=tx, amount=amount)

    try:
        amendment_kind = AmendmentKind(raw_type)
    except ValueError:
        raise MalformedRecordError(f"unknown transaction type {raw_type!r}") from None

    amendment = Amendment(kind=amendment_kind, client=client, tx=tx)
    if amount is not None:
        logger.warning(
            "Amount %s on [ %s ] will be ignored: amendments always apply to the whole transfer",
            amount,
            amendment,
        )
    return amendment


class CsvTransactionReader:
    """Lazy, single-pass reader of transaction records from CSV."""

    def __init__(self, stream: TextIO, delimiter: str = ",") -> None:
        """Initialize reader.

        Parameters
        ----------
        stream : TextIO
            Open text stream positioned at the header line.
        delimiter : str
            Field delimiter.
        """
        self.stream = stream
        self.delimiter = delimiter
        self._owns_stream = False

    @classmethod
    def from_path(cls, path: str | PathLike[str], delimiter: str = ",") -> CsvTransactionReader:
        """Open a CSV file for reading.

        Raises
        ------
        OSError
            If the file cannot be opened.
        """
        stream = Path(path).open(encoding="utf-8-sig", errors="surrogateescape", newline="")
        reader = cls(stream, delimiter=delimiter)
        reader._owns_stream = True
        return reader

    def results(self) -> Iterator[ReadResult]:
        """Yield one result per non-empty data row, errors included."""
        rows = csv.reader(self.stream, delimiter=self.delimiter)
        header: list[str] | None = None

        for row in rows:
            if header is None and row and row[0].startswith(_BOM):
                row[0] = row[0][len(_BOM):]
            values = [value.strip() for value in row]
            if not any(values):
                continue

            if _undecodable(values):
                error = MalformedRecordError("record is not valid UTF-8", line=rows.line_num)
                yield ReadResult(line=rows.line_num, error=error)
                if header is None:
                    return
                continue

            if header is None:
                header = [value.lower() for value in values]
                missing = [column for column in REQUIRED_COLUMNS if column not in header]
                if missing:
                    yield ReadResult(
                        line=rows.line_num,
                        error=MalformedRecordError(
                            "header is missing columns: " + ", ".join(missing),
                            line=rows.line_num,
                        ),
                    )
                    return
                continue

            fields: dict[str, str | None] = {}
            for index, name in enumerate(header):
                if name:
                    fields[name] = values[index] if index < len(values) else None

            try:
                transaction = parse_record(fields)
            except InputFormatError as err:
                err.line = rows.line_num
                yield ReadResult(line=rows.line_num, error=err)
            else:
                yield ReadResult(line=rows.line_num, transaction=transaction)

    def __iter__(self) -> Iterator[Transaction]:
        """Yield valid transactions, logging and skipping invalid rows."""
        for result in self.results():
            if result.error is not None:
                logger.error("CSV parsing error: %s", result.error)
                continue
            yield result.transaction

    def close(self) -> None:
        """Close the underlying stream if this reader opened it."""
        if self._owns_stream:
            self.stream.close()

    def __enter__(self) -> CsvTransactionReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
