import threading
from typing import List, Tuple


class RecordingAlarmSink:
    """Alarm sink that keeps every alarm in memory, for assertions in tests."""

    def __init__(self) -> None:
        self.alarms: List[Tuple[str, str]] = []
        self._lock = threading.Lock()

    def warn(self, alarm_type: str, message: str) -> None:
        with self._lock:
            self.alarms.append((alarm_type, message))

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.alarms]

    def clear(self) -> None:
        with self._lock:
            self.alarms.clear()
