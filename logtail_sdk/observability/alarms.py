"""Diagnostic alarms raised by processors while handling a batch.

Alarms are advisory: a processor reports a soft fault through
``AlarmSink.warn`` and carries on with the record. The default sink writes
each alarm to the log and keeps a per-type tally that can be inspected by the
host.
"""

import threading
from collections import Counter
from enum import Enum
from typing import Dict, Protocol

from logtail_sdk.constants import ALARM_LOG_LEVEL, DEFAULT_CONFIG_NAME
from logtail_sdk.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class AlarmType(str, Enum):
    """Alarm categories reported by the built-in processors."""

    KV_SPLITTER_ALARM = "KV_SPLITTER_ALARM"
    PIPELINE_ALARM = "PIPELINE_ALARM"


class AlarmSink(Protocol):
    """Protocol for one-way diagnostic reporting.

    Implementations must accept calls from several threads at once.
    """

    def warn(self, alarm_type: str, message: str) -> None:
        """
        Report a soft fault.

        Args:
            alarm_type (str): The alarm category, e.g. ``KV_SPLITTER_ALARM``.
            message (str): Human-readable description of the fault.
        """
        ...


class LoggerAlarmSink:
    """Alarm sink that logs through loguru and counts alarms per type."""

    def __init__(
        self, config_name: str = DEFAULT_CONFIG_NAME, level: str = ALARM_LOG_LEVEL
    ) -> None:
        self.config_name = config_name
        self.level = level
        self._counts: Counter = Counter()
        self._lock = threading.Lock()

    def warn(self, alarm_type: str, message: str) -> None:
        alarm_type = str(getattr(alarm_type, "value", alarm_type))
        with self._lock:
            self._counts[alarm_type] += 1
        # no positional args: loguru would otherwise str.format the message
        logger.bind(alarm_type=alarm_type, config_name=self.config_name).log(
            self.level, f"[{alarm_type}] {message}"
        )

    def counts(self) -> Dict[str, int]:
        """Return a snapshot of the number of alarms seen per type."""
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
