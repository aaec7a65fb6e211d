from typing import List, Tuple

from hypothesis import given, settings
from hypothesis import strategies as st

from logtail_sdk.models import LogRecord
from logtail_sdk.processors.context import PipelineContext
from logtail_sdk.processors.split.key_value import (
    KeyValueSplitter,
    KeyValueSplitterConfig,
)
from logtail_sdk.test_utils.alarms import RecordingAlarmSink
from logtail_sdk.test_utils.hypothesis.strategies.key_value import (
    delimited_content,
    distinct_tokens,
    safe_text_strategy,
)


def build_splitter(**options) -> KeyValueSplitter:
    splitter = KeyValueSplitter(KeyValueSplitterConfig(**options))
    splitter.init(PipelineContext(alarm_sink=RecordingAlarmSink()))
    return splitter


def split(splitter: KeyValueSplitter, content: str) -> List[Tuple[str, str]]:
    record = LogRecord()
    splitter.split_key_value(record, content)
    return record.pairs()


@given(generated=delimited_content())
@settings(max_examples=100)
def test_well_formed_content_round_trips(generated):
    content, pairs = generated
    assert split(build_splitter(), content) == pairs


@given(tokens=distinct_tokens(), data=st.data())
@settings(max_examples=50)
def test_multi_character_tokens(tokens, data):
    delimiter, separator = tokens
    content, pairs = data.draw(
        delimited_content(
            delimiter=delimiter, separator=separator, allow_empty_values=False
        )
    )
    splitter = build_splitter(delimiter=delimiter, separator=separator)
    assert split(splitter, content) == pairs


@given(
    key=st.text(alphabet=st.characters(exclude_characters=["\t"])),
    value=st.text(alphabet=st.characters(exclude_characters=["\t"])),
)
@settings(max_examples=100)
def test_single_pair_without_delimiter(key, value):
    assert len(split(build_splitter(), f"{key}:{value}")) == 1


@given(value=safe_text_strategy)
@settings(max_examples=100)
def test_dequoting_is_idempotent(value):
    splitter = build_splitter(quote_enabled=True, quote='"')

    assert splitter.get_value(value) == value
    dequoted = splitter.get_value(f'"{value}"')
    assert dequoted == value
    assert splitter.get_value(dequoted) == dequoted


@given(count=st.integers(min_value=1, max_value=20))
@settings(max_examples=20)
def test_synthesized_key_counters(count):
    content = "\t".join(f":{i}\tloose{i}" for i in range(count))
    fields = split(build_splitter(), content)

    empty_keys = [key for key, _ in fields if key.startswith("empty_key_")]
    loose_keys = [key for key, _ in fields if key.startswith("no_separator_key_")]
    assert empty_keys == [f"empty_key_{i}" for i in range(count)]
    assert loose_keys == [f"no_separator_key_{i}" for i in range(count)]


@given(
    pairs=st.lists(
        st.tuples(
            safe_text_strategy.filter(lambda key: key != "content"), st.text()
        ),
        max_size=10,
    )
)
@settings(max_examples=100)
def test_record_unchanged_without_source(pairs):
    splitter = build_splitter(source_key="content", err_if_source_key_not_found=False)
    record = LogRecord.from_pairs(pairs)

    splitter.process_log(record)

    assert record.pairs() == pairs
    assert splitter.context.alarm_sink.alarms == []
