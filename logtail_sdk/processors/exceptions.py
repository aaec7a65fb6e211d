"""Exceptions raised around processor setup.

Processing itself never raises; soft faults inside a batch are reported to
the alarm sink. These exceptions cover the host side: binding configuration,
attaching a context, and looking processors up by name.
"""

from typing import List, Optional

from logtail_sdk.common.error_codes import ERROR_CODES, ErrorCode


class ProcessorError(Exception):
    """Base exception for processor operations.

    Attributes:
        message: Human-readable error message.
        error_code: The :class:`ErrorCode` describing the failure category.
    """

    error_code: ErrorCode = ERROR_CODES["PROCESSOR_CONFIG_ERROR"]

    def __init__(self, message: str, error_code: Optional[ErrorCode] = None):
        if error_code is not None:
            self.error_code = error_code
        self.message = message
        super().__init__(f"{self.error_code.code}: {message}")


class ProcessorInitError(ProcessorError):
    """Raised when a processor cannot be attached to its pipeline context."""

    error_code = ERROR_CODES["PROCESSOR_INIT_ERROR"]


class ProcessorConfigError(ProcessorError):
    """Raised when processor configuration is invalid or bound too late.

    Example:
        >>> raise ProcessorConfigError(
        ...     "invalid detail for processor_split_key_value",
        ...     errors=["KeepSource: Input should be a valid boolean"],
        ... )
    """

    error_code = ERROR_CODES["PROCESSOR_CONFIG_ERROR"]

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class ProcessorNotFoundError(ProcessorError):
    """Raised when a processor type name has no registered factory."""

    error_code = ERROR_CODES["PROCESSOR_NOT_FOUND_ERROR"]

    def __init__(self, name: str):
        super().__init__(f"processor not registered: {name}")
        self.name = name


class ProcessorRegistrationError(ProcessorError):
    """Raised when a processor type name is registered twice."""

    error_code = ERROR_CODES["PROCESSOR_REGISTRATION_ERROR"]


class PipelineConfigError(ProcessorError):
    """Raised when a pipeline configuration document cannot be used."""

    error_code = ERROR_CODES["PIPELINE_CONFIG_ERROR"]
