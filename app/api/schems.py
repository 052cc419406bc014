from pydantic import BaseModel
from typing import Optional


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    summary: str
    transcript: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str
    details: Optional[str] = None
