"""Run a configured chain of processors over batches of log records.

A pipeline document lists processors by type name with their options:

.. code-block:: json

    {
        "processors": [
            {
                "type": "processor_split_key_value",
                "detail": {"SourceKey": "content", "KeepSource": false}
            }
        ]
    }
"""

from typing import Any, Dict, List, Optional, Union

import orjson
from pydantic import BaseModel, Field, ValidationError

from logtail_sdk.models import LogRecord
from logtail_sdk.observability.logger_adaptor import get_logger
from logtail_sdk.processors import ProcessorInterface
from logtail_sdk.processors.context import PipelineContext
from logtail_sdk.processors.exceptions import PipelineConfigError
from logtail_sdk.processors.registry import (
    ProcessorRegistry,
    register_builtin_processors,
)

logger = get_logger(__name__)


class ProcessorSpec(BaseModel):
    """One processor entry of a pipeline document."""

    type: str
    detail: Dict[str, Any] = Field(default_factory=dict)


class PipelineConfig(BaseModel):
    """A pipeline document: processors applied in order."""

    processors: List[ProcessorSpec] = Field(default_factory=list)


class ProcessorPipeline:
    """
    Ordered processors sharing one :class:`PipelineContext`.

    Usage:
        >>> pipeline = ProcessorPipeline.from_json(raw_config)
        >>> pipeline.process_logs(records)
    """

    def __init__(
        self,
        processors: List[ProcessorInterface],
        context: Optional[PipelineContext] = None,
    ):
        self.context = context or PipelineContext()
        self.processors = processors
        for processor in self.processors:
            processor.init(self.context)

    @classmethod
    def from_config(
        cls,
        config: Union[PipelineConfig, Dict[str, Any]],
        registry: Optional[ProcessorRegistry] = None,
        context: Optional[PipelineContext] = None,
    ) -> "ProcessorPipeline":
        """
        Build a pipeline from a parsed pipeline document.

        Raises:
            PipelineConfigError: If the document does not match the schema.
            ProcessorNotFoundError: If a processor type is not registered.
            ProcessorConfigError: If a processor detail is invalid.
        """
        if not isinstance(config, PipelineConfig):
            try:
                config = PipelineConfig.model_validate(config)
            except ValidationError as e:
                raise PipelineConfigError(f"invalid pipeline config: {e}") from e

        if registry is None:
            registry = register_builtin_processors()
        processors = [
            registry.create(spec.type, spec.detail) for spec in config.processors
        ]
        logger.info(
            f"Built pipeline with {len(processors)} processor(s): "
            f"{', '.join(spec.type for spec in config.processors)}"
        )
        return cls(processors, context=context)

    @classmethod
    def from_json(
        cls,
        raw: Union[str, bytes],
        registry: Optional[ProcessorRegistry] = None,
        context: Optional[PipelineContext] = None,
    ) -> "ProcessorPipeline":
        try:
            document = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise PipelineConfigError(f"pipeline config is not valid JSON: {e}") from e
        return cls.from_config(document, registry=registry, context=context)

    def process_logs(self, records: List[LogRecord]) -> List[LogRecord]:
        for processor in self.processors:
            records = processor.process_logs(records)
        return records
