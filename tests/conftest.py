"""Global test configuration and fixtures."""

import pytest

from logtail_sdk.processors.context import PipelineContext
from logtail_sdk.test_utils.alarms import RecordingAlarmSink


@pytest.fixture
def alarm_sink() -> RecordingAlarmSink:
    """Alarm sink capturing every alarm raised during a test."""
    return RecordingAlarmSink()


@pytest.fixture
def context(alarm_sink: RecordingAlarmSink) -> PipelineContext:
    return PipelineContext(config_name="test-config", alarm_sink=alarm_sink)
