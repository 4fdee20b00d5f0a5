"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response."""

    success: bool = False
    status: int
    message: str
    errors: dict[str, list[str]] | list[str] | None = None
    stack: str | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    success: bool = True
    message: str
