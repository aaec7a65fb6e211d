"""
Error codes for the logtail-sdk.

This module defines standardized error codes used throughout the logtail-sdk.
Error codes follow the format: Logtail-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Processor: Processor lifecycle and configuration errors
- Registry: Processor registration and lookup errors
- Pipeline: Pipeline configuration errors
"""

from enum import Enum
from typing import Dict


class ErrorComponent(Enum):
    """Components that can generate errors in the system."""

    PROCESSOR = "Processor"
    REGISTRY = "Registry"
    PIPELINE = "Pipeline"


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"Logtail-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Processor Errors
PROCESSOR_ERRORS = {
    "PROCESSOR_INIT_ERROR": ErrorCode(
        ErrorComponent.PROCESSOR.value,
        "500",
        "00",
        "Processor could not be attached to its pipeline context",
    ),
    "PROCESSOR_CONFIG_ERROR": ErrorCode(
        ErrorComponent.PROCESSOR.value, "400", "00", "Invalid processor configuration"
    ),
}

# Registry Errors
REGISTRY_ERRORS = {
    "PROCESSOR_NOT_FOUND_ERROR": ErrorCode(
        ErrorComponent.REGISTRY.value, "404", "00", "Processor type is not registered"
    ),
    "PROCESSOR_REGISTRATION_ERROR": ErrorCode(
        ErrorComponent.REGISTRY.value,
        "409",
        "00",
        "Processor type is already registered",
    ),
}

# Pipeline Errors
PIPELINE_ERRORS = {
    "PIPELINE_CONFIG_ERROR": ErrorCode(
        ErrorComponent.PIPELINE.value, "400", "00", "Invalid pipeline configuration"
    ),
}

# Combined dictionary of all error codes
ERROR_CODES: Dict[str, ErrorCode] = {
    **PROCESSOR_ERRORS,
    **REGISTRY_ERRORS,
    **PIPELINE_ERRORS,
}
