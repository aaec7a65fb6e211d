from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from logtail_sdk.models import LogRecord
from logtail_sdk.processors.context import PipelineContext
from logtail_sdk.processors.exceptions import ProcessorConfigError, ProcessorInitError


class ProcessorInterface(ABC):
    """
    Abstract base class for log processors.

    A processor is built with its default configuration, optionally bound to
    the ``detail`` section of a pipeline document, attached to a
    :class:`PipelineContext` with :meth:`init`, and then applied to batches
    with :meth:`process_logs`. Configuration is fixed once ``init`` has run.

    Usage:
        Subclass this class, set ``config_model`` and implement
        :meth:`description` and :meth:`process_logs`.

        >>> class UpperCaseProcessor(ProcessorInterface):
        >>>     config_model = UpperCaseConfig
        >>>     def process_logs(self, records):
        >>>         ...
    """

    config_model: ClassVar[Type[BaseModel]]

    def __init__(self, config: Optional[BaseModel] = None):
        self.config = config if config is not None else self.config_model()
        self.context: Optional[PipelineContext] = None

    def bind_config(self, detail: Mapping[str, Any]) -> None:
        """
        Overlay the given configuration detail on the current configuration.

        Args:
            detail (Mapping[str, Any]): Options keyed by field name or alias.

        Raises:
            ProcessorConfigError: If the detail is invalid or the processor
                has already been initialized.
        """
        if self.context is not None:
            raise ProcessorConfigError(
                f"{type(self).__name__} is initialized; configuration is frozen"
            )
        try:
            parsed = self.config_model.model_validate(dict(detail))
        except ValidationError as e:
            raise ProcessorConfigError(
                f"invalid configuration for {type(self).__name__}",
                errors=[
                    f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ],
            ) from e
        self.config = self.config.model_copy(
            update={name: getattr(parsed, name) for name in parsed.model_fields_set}
        )

    def init(self, context: PipelineContext) -> None:
        """
        Attach the processor to its pipeline context.

        Raises:
            ProcessorInitError: If no context is supplied.
        """
        if context is None:
            raise ProcessorInitError(
                f"{type(self).__name__} requires a pipeline context"
            )
        self.context = context

    @abstractmethod
    def description(self) -> str:
        raise NotImplementedError("description method not implemented")

    @abstractmethod
    def process_logs(self, records: List[LogRecord]) -> List[LogRecord]:
        """
        Process a batch of records in place and return the batch.
        To be implemented by the subclass
        """
        raise NotImplementedError("process_logs method not implemented")
