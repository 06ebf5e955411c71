"""Input readers producing validated transactions."""

from ledger_replay.readers.csv_reader import CsvTransactionReader, ReadResult, parse_record

__all__ = ["CsvTransactionReader", "ReadResult", "parse_record"]
