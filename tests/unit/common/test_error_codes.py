from logtail_sdk.common.error_codes import (
    ERROR_CODES,
    PIPELINE_ERRORS,
    PROCESSOR_ERRORS,
    REGISTRY_ERRORS,
    ErrorCode,
)
from logtail_sdk.processors.exceptions import (
    ProcessorConfigError,
    ProcessorError,
    ProcessorInitError,
)


def test_error_code_format():
    code = ErrorCode("Processor", "400", "07", "Something broke")
    assert code.code == "Logtail-Processor-400-07"
    assert str(code) == "Logtail-Processor-400-07: Something broke"


def test_all_codes_are_unique():
    codes = [error.code for error in ERROR_CODES.values()]
    assert len(codes) == len(set(codes))
    assert len(ERROR_CODES) == (
        len(PROCESSOR_ERRORS) + len(REGISTRY_ERRORS) + len(PIPELINE_ERRORS)
    )


def test_exceptions_carry_their_code():
    error = ProcessorInitError("no context")

    assert isinstance(error, ProcessorError)
    assert error.error_code is ERROR_CODES["PROCESSOR_INIT_ERROR"]
    assert error.message == "no context"
    assert str(error) == "Logtail-Processor-500-00: no context"


def test_error_code_override():
    error = ProcessorError("bad", error_code=ERROR_CODES["PIPELINE_CONFIG_ERROR"])
    assert error.error_code.code == "Logtail-Pipeline-400-00"


def test_config_error_collects_details():
    error = ProcessorConfigError("invalid", errors=["Quote: bad"])
    assert error.errors == ["Quote: bad"]
    assert ProcessorConfigError("invalid").errors == []
