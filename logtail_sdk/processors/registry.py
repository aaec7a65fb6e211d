"""Registry mapping processor type names to factories."""

from typing import Any, Callable, Dict, List, Mapping, Optional

from logtail_sdk.observability.logger_adaptor import get_logger
from logtail_sdk.processors import ProcessorInterface
from logtail_sdk.processors.exceptions import (
    ProcessorNotFoundError,
    ProcessorRegistrationError,
)
from logtail_sdk.processors.split.key_value import (
    PROCESSOR_NAME as KEY_VALUE_SPLITTER,
)
from logtail_sdk.processors.split.key_value import new_key_value_splitter

logger = get_logger(__name__)

ProcessorFactory = Callable[[], ProcessorInterface]


class ProcessorRegistry:
    """Maps processor type names (e.g. ``processor_split_key_value``) to factories.

    A factory takes no arguments and returns a default-configured processor.
    Hosts build a registry at startup, usually with
    :func:`register_builtin_processors`, and pass it to the pipeline.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, ProcessorFactory] = {}

    def register(self, name: str, factory: ProcessorFactory) -> None:
        """
        Register a processor factory.

        Args:
            name (str): The processor type name used in pipeline documents.
            factory (ProcessorFactory): Callable building a default instance.

        Raises:
            ProcessorRegistrationError: If ``name`` is already registered.
        """
        if name in self._factories:
            raise ProcessorRegistrationError(f"processor already registered: {name}")
        self._factories[name] = factory
        logger.debug(f"Registered processor '{name}'")

    def get_factory(self, name: str) -> ProcessorFactory:
        factory = self._factories.get(name)
        if factory is None:
            raise ProcessorNotFoundError(name)
        return factory

    def create(
        self, name: str, detail: Optional[Mapping[str, Any]] = None
    ) -> ProcessorInterface:
        """
        Build a processor and bind its configuration detail.

        Raises:
            ProcessorNotFoundError: If ``name`` is not registered.
            ProcessorConfigError: If ``detail`` is invalid.
        """
        processor = self.get_factory(name)()
        if detail:
            processor.bind_config(detail)
        return processor

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def register_builtin_processors(
    registry: Optional[ProcessorRegistry] = None,
) -> ProcessorRegistry:
    """Register the processors shipped with the sdk and return the registry."""
    registry = registry if registry is not None else ProcessorRegistry()
    registry.register(KEY_VALUE_SPLITTER, new_key_value_splitter)
    return registry
