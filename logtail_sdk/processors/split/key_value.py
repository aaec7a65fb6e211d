"""Split a delimited ``key<separator>value`` string field into record fields.

Given ``a:1\\tb:2\\tc:"x y"`` in the source field, the splitter appends
``a=1``, ``b=2`` and ``c=x y`` to the record. Pairs without a separator and
pairs with an empty key get synthesized keys built from a prefix and a
per-value counter.

Known limitation: the quote handling looks ahead for a single closing quote
after the first delimiter inside a quoted value. Values holding several
delimiters, nested quotes or an unterminated quote are split on a best-effort
basis and may lose characters.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from logtail_sdk.models import LogContent, LogRecord
from logtail_sdk.observability.alarms import AlarmType
from logtail_sdk.observability.logger_adaptor import get_logger
from logtail_sdk.processors import ProcessorInterface

logger = get_logger(__name__)

PROCESSOR_NAME = "processor_split_key_value"

DEFAULT_DELIMITER = "\t"
DEFAULT_SEPARATOR = ":"
DEFAULT_EMPTY_KEY_PREFIX = "empty_key_"
DEFAULT_NO_SEPARATOR_KEY_PREFIX = "no_separator_key_"

_STRING_DEFAULTS = {
    "delimiter": DEFAULT_DELIMITER,
    "separator": DEFAULT_SEPARATOR,
    "empty_key_prefix": DEFAULT_EMPTY_KEY_PREFIX,
    "no_separator_key_prefix": DEFAULT_NO_SEPARATOR_KEY_PREFIX,
}


class KeyValueSplitterConfig(BaseModel):
    """Configuration for :class:`KeyValueSplitter`.

    Options are accepted by field name or by the PascalCase alias used in
    pipeline documents (``SourceKey``, ``Delimiter``, ...). Empty strings for
    the delimiter, separator and key prefixes fall back to their defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    source_key: str = Field(default="", alias="SourceKey")
    # Split key/value pairs.
    delimiter: str = Field(default=DEFAULT_DELIMITER, alias="Delimiter")
    # Split key and value.
    separator: str = Field(default=DEFAULT_SEPARATOR, alias="Separator")
    keep_source: bool = Field(default=True, alias="KeepSource")
    empty_key_prefix: str = Field(
        default=DEFAULT_EMPTY_KEY_PREFIX, alias="EmptyKeyPrefix"
    )
    no_separator_key_prefix: str = Field(
        default=DEFAULT_NO_SEPARATOR_KEY_PREFIX, alias="NoSeparatorKeyPrefix"
    )
    quote_enabled: bool = Field(default=False, alias="QuoteFlag")
    quote: str = Field(default="", alias="Quote")

    discard_when_separator_not_found: bool = Field(
        default=False, alias="DiscardWhenSeparatorNotFound"
    )
    err_if_source_key_not_found: bool = Field(
        default=True, alias="ErrIfSourceKeyNotFound"
    )
    err_if_separator_not_found: bool = Field(
        default=True, alias="ErrIfSeparatorNotFound"
    )
    err_if_key_is_empty: bool = Field(default=True, alias="ErrIfKeyIsEmpty")

    @field_validator(
        "delimiter", "separator", "empty_key_prefix", "no_separator_key_prefix"
    )
    @classmethod
    def _default_when_empty(cls, value: str, info: ValidationInfo) -> str:
        return value or _STRING_DEFAULTS[info.field_name]

    @property
    def quoting(self) -> bool:
        return self.quote_enabled and len(self.quote) > 0


class KeyValueSplitter(ProcessorInterface):
    """
    Processor that splits one field of each record into key/value fields.

    The instance holds no per-record state, so a single splitter can process
    records from several threads at once.

    Usage:
        >>> splitter = KeyValueSplitter(KeyValueSplitterConfig(source_key="content"))
        >>> splitter.init(PipelineContext())
        >>> splitter.process_logs(records)
    """

    config_model = KeyValueSplitterConfig
    config: KeyValueSplitterConfig

    def description(self) -> str:
        return "Processor to split key value pairs"

    def process_logs(self, records: List[LogRecord]) -> List[LogRecord]:
        for record in records:
            self.process_log(record)
        return records

    def process_log(self, record: LogRecord) -> None:
        source_key = self.config.source_key
        for idx, content in enumerate(record.contents):
            if not source_key or content.key == source_key:
                if not self.config.keep_source:
                    record.contents = [
                        field for i, field in enumerate(record.contents) if i != idx
                    ]
                self.split_key_value(record, content.value)
                return

        if self.config.err_if_source_key_not_found:
            self._warn(f"can not find key: {source_key}")

    def split_key_value(self, record: LogRecord, content: str) -> None:
        """
        Append the pairs found in ``content`` to ``record``.

        Args:
            record (LogRecord): The record receiving the new fields.
            content (str): The raw ``key<separator>value<delimiter>...`` string.
        """
        config = self.config
        delimiter_len = len(config.delimiter)
        separator_len = len(config.separator)
        empty_key_index = 0
        no_separator_key_index = 0

        if not content:
            return

        while True:
            boundary = content.find(config.delimiter)
            pair = content if boundary == -1 else content[:boundary]
            pair, boundary = self.extend_quoted_pair(pair, content, boundary)

            pos = pair.find(config.separator)
            if pos == -1:
                if config.err_if_separator_not_found:
                    self._warn(f"can not find separator in {pair}")
                if not config.discard_when_separator_not_found:
                    record.contents.append(
                        LogContent(
                            key=f"{config.no_separator_key_prefix}{no_separator_key_index}",
                            value=self.get_value(pair),
                        )
                    )
                    no_separator_key_index += 1
            else:
                key = pair[:pos]
                value = self.get_value(pair[pos + separator_len :])
                if not key:
                    key = f"{config.empty_key_prefix}{empty_key_index}"
                    empty_key_index += 1
                    if config.err_if_key_is_empty:
                        self._warn(f"the key of pair with value ({value}) is empty")
                record.contents.append(LogContent(key=key, value=value))

            if boundary == -1 or boundary + delimiter_len > len(content):
                break
            # a trailing delimiter leaves "" behind, which is scanned as a final empty pair
            content = content[boundary + delimiter_len :]

    def extend_quoted_pair(
        self, pair: str, content: str, boundary: int
    ) -> Tuple[str, int]:
        """
        Re-cut a pair whose quoted value was split by an embedded delimiter.

        When ``pair`` opens a quote (it starts with the quote, or holds
        ``separator + quote`` after a non-empty key) but does not end with
        one, the boundary moves forward to just past the next quote found
        after the delimiter.

        Args:
            pair (str): The candidate pair, ``content[:boundary]``.
            content (str): The unconsumed source text.
            boundary (int): Index of the delimiter ending ``pair``, or -1.

        Returns:
            Tuple[str, int]: The possibly extended pair and its boundary.
        """
        config = self.config
        if not config.quoting or pair.endswith(config.quote):
            return pair, boundary

        found = content.find(config.quote, boundary + 1)
        next_quote = found - (boundary + 1) if found != -1 else -1
        opening = config.separator + config.quote
        if pair.find(opening) > 0 or pair.startswith(config.quote):
            next_quote += len(opening)
            if next_quote > 0:
                boundary += next_quote
                pair = content[:boundary]
        return pair, boundary

    def get_value(self, value: str) -> str:
        """Strip one pair of surrounding quotes from ``value`` when quoting is on."""
        config = self.config
        if config.quoting:
            quote_len = len(config.quote)
            if (
                len(value) >= 2 * quote_len
                and value.startswith(config.quote)
                and value.endswith(config.quote)
            ):
                value = value[quote_len : len(value) - quote_len]
        return value

    def _warn(self, message: str) -> None:
        if self.context is None:
            logger.warning(f"[{AlarmType.KV_SPLITTER_ALARM.value}] {message}")
            return
        self.context.warn(AlarmType.KV_SPLITTER_ALARM.value, message)


def new_key_value_splitter(
    config: Optional[KeyValueSplitterConfig] = None,
) -> KeyValueSplitter:
    """Factory registered under :data:`PROCESSOR_NAME`."""
    return KeyValueSplitter(config)
