"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import MagicMock

# Configuration is read at import time, so set the environment first
os.environ.setdefault("GEMINI_KEY", "test_api_key")
os.environ["ENVIRONMENT"] = "development"
os.environ.pop("HTTP_PROXY", None)
os.environ.pop("PROXY_URL", None)

from app.models.schemas import CaptionEntry  # noqa: E402
from app.core.transcript_fetcher import TranscriptFetcher  # noqa: E402
from app.core.summarizer import TranscriptSummarizer  # noqa: E402


@pytest.fixture(scope="session")
def test_video_id():
    """Return a test YouTube video ID."""
    return "V3TUEeB0kW0"


@pytest.fixture
def captions():
    """Fixture with a short caption track."""
    return [
        CaptionEntry(offset_ms=0.0, duration_ms=1500.0, text="hello world"),
        CaptionEntry(offset_ms=1500.0, duration_ms=2000.0, text="this is a test"),
        CaptionEntry(offset_ms=3500.0, duration_ms=1000.0, text="goodbye"),
    ]


@pytest.fixture
def timedtext_xml():
    """Fixture with a timed-text document as served by YouTube."""
    return (
        '<?xml version="1.0" encoding="utf-8" ?><transcript>'
        '<text start="0" dur="1.5">hello+world</text>'
        '<text start="1.5" dur="2">this%20is+a+test</text>'
        '<text start="3.5" dur="1">goodbye</text>'
        '</transcript>'
    )


@pytest.fixture
def mock_fetcher():
    """Fixture with a transcript fetcher double."""
    fetcher = MagicMock(spec=TranscriptFetcher)
    fetcher.uses_proxy = False
    return fetcher


@pytest.fixture
def mock_summarizer():
    """Fixture with a transcript summarizer double."""
    summarizer = MagicMock(spec=TranscriptSummarizer)
    summarizer.summarize.return_value = "This is a summarized transcript of the video."
    return summarizer
