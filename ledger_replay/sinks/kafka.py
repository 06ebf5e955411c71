"""Kafka sink publishing final account balances to a topic."""

import json
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from confluent_kafka import Producer

from ledger_replay.exceptions import SinkError
from ledger_replay.models import AccountSnapshot
from ledger_replay.sinks.serialization import snapshot_to_row

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "ledger.accounts"


@dataclass
class ProducerConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str
    acks: str = "all"  # "0", "1", "all"
    linger_ms: int = 5  # ms to wait for batching
    compression: str = "snappy"  # none, gzip, snappy, lz4
    retries: int = 3


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaSink:
    """Output one message per account to a Kafka topic, keyed by client."""

    def __init__(self, config: ProducerConfig | str, topic: str = DEFAULT_TOPIC) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : ProducerConfig | str
            Producer configuration or bootstrap servers string.
        topic : str
            Destination topic.
        """
        if isinstance(config, str):
            config = ProducerConfig(bootstrap_servers=config)

        self.config = config
        self.topic = topic
        self.producer = self._create_producer()
        self.stats = ProducerStats()

    def _create_producer(self) -> Producer:
        """Create Kafka producer with configuration."""
        return Producer(
            {
                "bootstrap.servers": self.config.bootstrap_servers,
                "acks": self.config.acks,
                "retries": self.config.retries,
                "linger.ms": self.config.linger_ms,
                "compression.type": self.config.compression,
            }
        )

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def send(self, snapshot: AccountSnapshot) -> None:
        """Send a single account snapshot."""
        value = json.dumps(snapshot_to_row(snapshot), ensure_ascii=False).encode("utf-8")

        self.producer.produce(
            topic=self.topic,
            key=str(snapshot.client).encode("utf-8"),
            value=value,
            callback=self._delivery_callback,
        )
        self.stats.sent += 1
        self.producer.poll(0)

    def write_accounts(self, accounts: Iterable[AccountSnapshot]) -> None:
        """Publish every account and wait for delivery."""
        self.stats = ProducerStats(start_time=time.time())

        for snapshot in accounts:
            self.send(snapshot)

        self.flush()
        self.stats.end_time = time.time()
        logger.info(
            "Published to %s: sent=%d, delivered=%d, failed=%d (%.1f%% delivered in %.2fs)",
            self.topic,
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
            self.stats.success_rate * 100,
            self.stats.end_time - self.stats.start_time,
        )

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer.

        Raises
        ------
        SinkError
            If any message failed delivery.
        """
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
        if self.stats.failed:
            raise SinkError(f"{self.stats.failed} account messages failed delivery to {self.topic}")
