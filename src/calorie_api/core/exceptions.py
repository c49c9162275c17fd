"""Custom exception classes for the API and the scan pipeline."""

from typing import Any


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int = 400, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} with id '{resource_id}' not found",
            status_code=404,
            details={"resource": resource, "id": resource_id},
        )


class ValidationError(APIError):
    """Validation error."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, status_code=422, details=details)


class PipelineError(Exception):
    """
    Base error for the image / recognition / planning pipeline.

    Pipeline operations either return a complete value or raise one of
    these. Callers decide how to present the failure.
    """

    default_code = "PIPELINE_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        provider: str = "unknown",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.provider = provider
        self.details = details or {}


class DecodeError(PipelineError):
    """Image could not be decoded or drawn onto an RGB surface."""

    default_code = "DECODE_ERROR"


class RecognitionError(PipelineError):
    """Food recognition call failed or returned unusable output."""

    default_code = "RECOGNITION_ERROR"


class PlanGenerationError(PipelineError):
    """Meal plan generation call failed or returned unusable output."""

    default_code = "PLAN_GENERATION_ERROR"
