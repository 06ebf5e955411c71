"""Configuration management for ledger-replay."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ledger_replay.exceptions import ConfigurationError

OUTPUT_FORMATS = ("csv", "json", "kafka")
LOG_FORMATS = ("standard", "json")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class InputConfig:
    """Transaction input configuration."""

    delimiter: str = ","


@dataclass
class OutputConfig:
    """Account output configuration."""

    format: str = "csv"
    output_path: Path | None = None  # csv only, stdout when None
    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False
    sort_by_client: bool = False


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    topic: str = "ledger.accounts"


@dataclass
class ReplayConfig:
    """Main configuration for ledger-replay."""

    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check option values.

        Raises
        ------
        ConfigurationError
            If an option has an unsupported value.
        """
        if self.output.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format {self.output.format!r}, expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {', '.join(LOG_FORMATS)}"
            )
        if len(self.input.delimiter) != 1:
            raise ConfigurationError(f"CSV delimiter must be one character, got {self.input.delimiter!r}")

    @classmethod
    def from_env(cls) -> "ReplayConfig":
        """Create config from environment variables."""
        input_config = InputConfig(delimiter=os.getenv("CSV_DELIMITER", ","))

        output_path = os.getenv("OUTPUT_PATH")
        output = OutputConfig(
            format=os.getenv("OUTPUT_FORMAT", "csv").lower(),
            output_path=Path(output_path) if output_path else None,
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_flag("PRETTY_JSON"),
            sort_by_client=_env_flag("SORT_BY_CLIENT"),
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            topic=os.getenv("KAFKA_TOPIC", "ledger.accounts"),
        )

        return cls(
            input=input_config,
            output=output,
            kafka=kafka,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )
