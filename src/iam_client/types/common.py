"""Common response types."""

from typing import Any

from pydantic import BaseModel, Field


class IamResponse(BaseModel):
    """Envelope returned by the transport for every successful request."""

    status_code: int = Field(..., description="HTTP status code")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Response headers, lower-cased names"
    )
    data: Any = Field(None, description="Parsed JSON payload, raw text, or None")
