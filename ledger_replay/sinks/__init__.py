"""Output sinks for rendering final account balances."""

from ledger_replay.sinks.csv_file import CsvSink
from ledger_replay.sinks.json_file import JsonFileSink
from ledger_replay.sinks.kafka import KafkaSink

__all__ = ["CsvSink", "JsonFileSink", "KafkaSink"]
