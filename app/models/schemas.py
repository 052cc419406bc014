"""
Data models for the YouTube transcript summarizer application.
"""
import time
from typing import Optional, List
from pydantic import BaseModel, Field
from app.config import config


class CaptionEntry(BaseModel):
    """A single caption line with its timing in milliseconds."""
    offset_ms: float
    duration_ms: float
    text: str

    model_config = {"frozen": True}


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    video_id: str
    summary: str
    transcript_text: str
    captions: List[CaptionEntry] = []
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
