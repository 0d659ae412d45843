"""
Pydantic schemas for result responses.

ProblemDetails follows RFC 9457 ("application/problem+json").
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """Problem details body returned for error outcomes.

    Attributes:
        type: URI reference identifying the problem type.
        title: Short human-readable summary, taken from the outcome message.
        status: HTTP status code, repeated in the body.
        detail: Optional explanation specific to this occurrence.
    """

    type: str = Field(default="about:blank", description="Problem type URI")
    title: Optional[str] = Field(default=None, description="Problem summary")
    status: int = Field(..., ge=100, le=599, description="HTTP status code")
    detail: Optional[str] = Field(default=None, description="Occurrence detail")
