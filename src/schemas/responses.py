from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseResponse(BaseModel):
    """Base response schema with common fields."""

    success: bool = Field(..., description="Whether the operation was successful")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseResponse):
    """Envelope used by the application-wide exception handler."""

    error: dict[str, Any] = Field(..., description="Error details")
    message: str = Field(..., description="Error message")


class HealthCheckResponse(BaseResponse):
    """Health check response schema."""

    status: str = Field(..., description="Service status")


class FieldError(BaseModel):
    """A validation failure tied to one input field."""

    field: str = Field(..., description="Name of the rejected field")
    rejected_value: Any = Field(None, description="Value that failed validation")
    message: str = Field(..., description="Why the value was rejected")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def __str__(self) -> str:
        return f"Field error on '{self.field}': rejected value [{self.rejected_value!r}]; {self.message}"
