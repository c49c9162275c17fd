"""Error payloads returned by pipeline-backed routes."""

from typing import Any

from pydantic import BaseModel, Field

from calorie_api.core.exceptions import PipelineError


class PipelineErrorDetail(BaseModel):
    """Body of the ``detail`` field when a scan or plan request fails."""

    error_code: str = Field(..., description="Machine-readable failure code")
    message: str = Field(..., description="User-facing message")
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_error(cls, error: PipelineError, message: str | None = None) -> "PipelineErrorDetail":
        return cls(
            error_code=error.error_code,
            message=message or error.message,
            details={"provider": error.provider, **error.details},
        )
