from typing import Optional

from logtail_sdk.constants import DEFAULT_CONFIG_NAME
from logtail_sdk.observability.alarms import AlarmSink, LoggerAlarmSink


class PipelineContext:
    """
    Host-side context handed to every processor at ``init`` time.

    Attributes:
        config_name (str): Name of the pipeline configuration the processor belongs to.
        alarm_sink (AlarmSink): Where processors report soft faults.
    """

    def __init__(
        self,
        config_name: str = DEFAULT_CONFIG_NAME,
        alarm_sink: Optional[AlarmSink] = None,
    ):
        self.config_name = config_name
        self.alarm_sink = (
            alarm_sink
            if alarm_sink is not None
            else LoggerAlarmSink(config_name=config_name)
        )

    def warn(self, alarm_type: str, message: str) -> None:
        self.alarm_sink.warn(alarm_type, message)

    def __repr__(self) -> str:
        return f"PipelineContext(config_name={self.config_name!r})"
