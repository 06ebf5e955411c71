"""Command line entry point: replay a CSV of transactions and print balances.

Usage:
    ledger-replay transactions.csv > accounts.csv
    ledger-replay transactions.csv --output-format json --output-dir out/
    ledger-replay transactions.csv --output-format kafka --kafka-bootstrap localhost:9092
"""

import argparse
import sys
from pathlib import Path

from ledger_replay import __version__
from ledger_replay.config import LOG_FORMATS, OUTPUT_FORMATS, ReplayConfig
from ledger_replay.exceptions import ConfigurationError, SinkError
from ledger_replay.logging import get_logger, setup_logging
from ledger_replay.readers import CsvTransactionReader
from ledger_replay.replay import replay
from ledger_replay.sinks import CsvSink, JsonFileSink, KafkaSink
from ledger_replay.sinks.kafka import ProducerConfig

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ledger-replay",
        description="Replay deposits, withdrawals and disputes and output final account balances.",
    )
    parser.add_argument("input", type=Path, help="Path to the transactions CSV file")
    parser.add_argument("--output-format", choices=OUTPUT_FORMATS, help="Where to write accounts")
    parser.add_argument("--output", type=Path, help="CSV output file (default: stdout)")
    parser.add_argument("--output-dir", type=Path, help="Directory for JSON output")
    parser.add_argument("--pretty", action="store_true", default=None, help="Pretty-print JSON output")
    parser.add_argument("--sort", action="store_true", default=None, help="Order accounts by client id")
    parser.add_argument("--kafka-bootstrap", help="Kafka bootstrap servers")
    parser.add_argument("--kafka-topic", help="Kafka topic for account messages")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="Log output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_overrides(config: ReplayConfig, args: argparse.Namespace) -> ReplayConfig:
    """Overlay command line flags on environment configuration."""
    if args.output_format is not None:
        config.output.format = args.output_format
    if args.output is not None:
        config.output.output_path = args.output
    if args.output_dir is not None:
        config.output.output_dir = args.output_dir
    if args.pretty is not None:
        config.output.pretty_json = args.pretty
    if args.sort is not None:
        config.output.sort_by_client = args.sort
    if args.kafka_bootstrap is not None:
        config.kafka.bootstrap_servers = args.kafka_bootstrap
    if args.kafka_topic is not None:
        config.kafka.topic = args.kafka_topic
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config


def create_sink(config: ReplayConfig) -> CsvSink | JsonFileSink | KafkaSink:
    """Build the sink selected by the output configuration."""
    output = config.output
    if output.format == "json":
        return JsonFileSink(output.output_dir, pretty=output.pretty_json)
    if output.format == "kafka":
        producer_config = ProducerConfig(
            bootstrap_servers=config.kafka.bootstrap_servers,
            acks=config.kafka.acks,
            linger_ms=config.kafka.linger_ms,
            compression=config.kafka.compression,
            retries=config.kafka.retries,
        )
        return KafkaSink(producer_config, topic=config.kafka.topic)
    return CsvSink(output.output_path, sort_by_client=output.sort_by_client)


def main(argv: list[str] | None = None) -> int:
    """Run the replay. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    config = apply_overrides(ReplayConfig.from_env(), args)

    try:
        config.validate()
    except ConfigurationError as err:
        setup_logging()
        logger.error("Invalid configuration: %s", err)
        return 1

    setup_logging(level=config.log_level, format_type=config.log_format)
    logger.info("Input CSV file: %s", args.input)

    try:
        reader = CsvTransactionReader.from_path(args.input, delimiter=config.input.delimiter)
    except OSError as err:
        logger.error("Cannot read %s: %s", args.input, err)
        return 1

    with reader:
        ledger = replay(reader)

    accounts = ledger.accounts()
    if config.output.sort_by_client and config.output.format != "csv":
        accounts.sort(key=lambda snapshot: snapshot.client)

    try:
        sink = create_sink(config)
        try:
            sink.write_accounts(accounts)
        finally:
            sink.close()
    except (OSError, SinkError) as err:
        logger.error("Failed to write accounts: %s", err)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
