from logtail_sdk.processors.split.key_value import (
    KeyValueSplitter,
    KeyValueSplitterConfig,
)

__all__ = ["KeyValueSplitter", "KeyValueSplitterConfig"]
