import pytest

from logtail_sdk.processors.exceptions import (
    ProcessorConfigError,
    ProcessorNotFoundError,
    ProcessorRegistrationError,
)
from logtail_sdk.processors.registry import (
    ProcessorRegistry,
    register_builtin_processors,
)
from logtail_sdk.processors.split.key_value import (
    PROCESSOR_NAME,
    KeyValueSplitter,
    KeyValueSplitterConfig,
)


@pytest.fixture
def registry() -> ProcessorRegistry:
    return register_builtin_processors()


def test_builtin_processors_registered(registry: ProcessorRegistry):
    assert PROCESSOR_NAME == "processor_split_key_value"
    assert PROCESSOR_NAME in registry
    assert registry.names() == [PROCESSOR_NAME]
    assert len(registry) == 1


def test_register_into_existing_registry():
    registry = ProcessorRegistry()
    assert register_builtin_processors(registry) is registry
    assert PROCESSOR_NAME in registry


def test_registries_are_independent():
    first = register_builtin_processors()
    second = ProcessorRegistry()
    assert PROCESSOR_NAME in first
    assert PROCESSOR_NAME not in second


def test_factory_returns_fresh_default_instances(registry: ProcessorRegistry):
    factory = registry.get_factory(PROCESSOR_NAME)
    first, second = factory(), factory()

    assert isinstance(first, KeyValueSplitter)
    assert first is not second
    assert first.config == KeyValueSplitterConfig()


def test_create_binds_detail(registry: ProcessorRegistry):
    processor = registry.create(
        PROCESSOR_NAME, {"SourceKey": "content", "Separator": "="}
    )

    assert processor.config.source_key == "content"
    assert processor.config.separator == "="
    assert processor.config.delimiter == "\t"


def test_create_with_invalid_detail(registry: ProcessorRegistry):
    with pytest.raises(ProcessorConfigError):
        registry.create(PROCESSOR_NAME, {"KeepSource": [1, 2]})


def test_unknown_processor(registry: ProcessorRegistry):
    with pytest.raises(ProcessorNotFoundError) as exc_info:
        registry.create("processor_unknown")

    assert exc_info.value.name == "processor_unknown"
    assert "Logtail-Registry-404-00" in str(exc_info.value)


def test_duplicate_registration(registry: ProcessorRegistry):
    with pytest.raises(ProcessorRegistrationError):
        registry.register(PROCESSOR_NAME, KeyValueSplitter)
