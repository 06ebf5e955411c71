"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from ledger_replay.config import InputConfig, KafkaConfig, OutputConfig, ReplayConfig
from ledger_replay.exceptions import ConfigurationError
from ledger_replay.logging import JsonFormatter, get_logger, setup_logging


class TestOutputConfig:
    """Tests for InputConfig, OutputConfig and KafkaConfig."""

    def test_input_default(self) -> None:
        assert InputConfig().delimiter == ","

    def test_output_default_values(self) -> None:
        """Test default configuration values."""
        config = OutputConfig()

        assert config.format == "csv"
        assert config.output_path is None
        assert config.output_dir == Path("output")
        assert config.pretty_json is False
        assert config.sort_by_client is False

    def test_kafka_default_values(self) -> None:
        """Test default Kafka configuration values."""
        config = KafkaConfig()

        assert config.bootstrap_servers == "localhost:9092"
        assert config.acks == "all"
        assert config.linger_ms == 5
        assert config.compression == "snappy"
        assert config.retries == 3
        assert config.topic == "ledger.accounts"


class TestReplayConfig:
    """Tests for ReplayConfig."""

    def test_default_values(self) -> None:
        config = ReplayConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        config.validate()

    def test_from_env_default(self, clean_env: None) -> None:
        """Test from_env with no variables set."""
        config = ReplayConfig.from_env()

        assert config == ReplayConfig()

    def test_from_env_custom(self, clean_env: None) -> None:
        """Test from_env with custom values."""
        env = {
            "CSV_DELIMITER": ";",
            "OUTPUT_FORMAT": "JSON",
            "OUTPUT_PATH": "/tmp/accounts.csv",
            "OUTPUT_DIR": "/tmp/out",
            "PRETTY_JSON": "true",
            "SORT_BY_CLIENT": "TRUE",
            "KAFKA_BOOTSTRAP_SERVERS": "kafka:9092",
            "KAFKA_ACKS": "1",
            "KAFKA_TOPIC": "balances",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "Json",
        }

        with patch.dict(os.environ, env):
            config = ReplayConfig.from_env()

        assert config.input.delimiter == ";"
        assert config.output.format == "json"
        assert config.output.output_path == Path("/tmp/accounts.csv")
        assert config.output.output_dir == Path("/tmp/out")
        assert config.output.pretty_json is True
        assert config.output.sort_by_client is True
        assert config.kafka.bootstrap_servers == "kafka:9092"
        assert config.kafka.acks == "1"
        assert config.kafka.topic == "balances"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_validate_unknown_output_format(self) -> None:
        config = ReplayConfig(output=OutputConfig(format="parquet"))

        with pytest.raises(ConfigurationError, match="Unknown output format 'parquet'"):
            config.validate()

    def test_validate_unknown_log_format(self) -> None:
        config = ReplayConfig(log_format="xml")

        with pytest.raises(ConfigurationError, match="Unknown log format"):
            config.validate()

    @pytest.mark.parametrize("delimiter", ["", ";;"])
    def test_validate_delimiter(self, delimiter: str) -> None:
        config = ReplayConfig(input=InputConfig(delimiter=delimiter))

        with pytest.raises(ConfigurationError, match="one character"):
            config.validate()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        assert logging.getLogger("ledger_replay").level == logging.INFO
        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        """Test debug level logging setup."""
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.parametrize("level", ["INVALID", "BASIC_FORMAT"])
    def test_setup_logging_invalid_level(self, level: str) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level=level)

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_writes_to_stderr(self) -> None:
        """Test the default handler targets stderr."""
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_setup_logging_custom_stream(self) -> None:
        """Test logging to a given stream."""
        stream = io.StringIO()
        setup_logging(stream=stream)

        get_logger("ledger_replay.test").info("hello")

        assert "| INFO     | ledger_replay.test | hello" in stream.getvalue()

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        has_json_formatter = any(
            isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers
        )
        assert has_json_formatter

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_external_loggers_quieted(self) -> None:
        """Test that external library loggers are quieted."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("confluent_kafka").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        params = {
            "name": "test.logger",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Test %s",
            "args": ("message",),
            "exc_info": None,
        }
        params.update(kwargs)
        return logging.LogRecord(**params)

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        """Test formatting with exception info."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        """Test formatting with extra fields."""
        record = self._record()
        record.extra = {"client": 23}

        data = json.loads(JsonFormatter().format(record))

        assert data["client"] == 23


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("ledger_replay.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "ledger_replay.module"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for ledger_replay __init__.py."""

    def test_version_exported(self) -> None:
        from ledger_replay import __version__

        assert isinstance(__version__, str)
