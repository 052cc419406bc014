"""
Tests for the transcript summarizer module.
"""

import pytest
from unittest.mock import patch, MagicMock

from google.genai import errors as genai_errors
from google.genai import types

from app.config import config
from app.core.prompts import build_summary_prompt
from app.core.summarizer import TranscriptSummarizer
from app.models.schemas import SummaryConfig
from app.utils.error_handling import SummarizationError


@pytest.fixture
def mock_genai_client():
    """Fixture to mock the Gemini client."""
    client = MagicMock()
    mock_response = MagicMock()
    mock_response.text = "This is a summarized transcript of the video."
    client.models.generate_content.return_value = mock_response
    return client


@pytest.fixture
def summary_config():
    """Fixture to create a SummaryConfig object."""
    return SummaryConfig(model="gemini-1.5-flash")


def test_init_summarizer_builds_client():
    """Test initializing the summarizer with an API key."""
    with patch("app.core.summarizer.genai.Client") as mock_client_class:
        summarizer = TranscriptSummarizer(api_key="test_api_key")

    mock_client_class.assert_called_once_with(api_key="test_api_key")
    assert summarizer.api_key == "test_api_key"
    assert summarizer.client is mock_client_class.return_value


def test_init_summarizer_requires_api_key():
    with patch.object(config, "GEMINI_KEY", None):
        with pytest.raises(ValueError):
            TranscriptSummarizer()


def test_prompt_embeds_transcript_verbatim():
    transcript_text = "We talk about {braces} and 100% of the details."
    prompt = build_summary_prompt(transcript_text)

    assert f"Transcript: {transcript_text}" in prompt
    assert "4-5 paragraph summary" in prompt
    assert "Do not use any markdown syntax" in prompt


def test_summarize(mock_genai_client, summary_config):
    """Test summarizing a transcript with a single generation call."""
    summarizer = TranscriptSummarizer(api_key="test_api_key", client=mock_genai_client)
    summary = summarizer.summarize("This is a short test transcript.", summary_config)

    mock_genai_client.models.generate_content.assert_called_once()
    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-1.5-flash"
    assert kwargs["contents"] == build_summary_prompt("This is a short test transcript.")
    assert kwargs["config"] is None
    assert summary == "This is a summarized transcript of the video."


def test_summarize_with_generation_settings(mock_genai_client):
    summarizer = TranscriptSummarizer(client=mock_genai_client)
    summarizer.summarize("transcript", SummaryConfig(model="gemini-2.0-flash", temperature=0.2, max_tokens=512))

    kwargs = mock_genai_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-2.0-flash"
    assert isinstance(kwargs["config"], types.GenerateContentConfig)
    assert kwargs["config"].temperature == 0.2
    assert kwargs["config"].max_output_tokens == 512


def test_summarize_empty_response_text(mock_genai_client, summary_config):
    mock_genai_client.models.generate_content.return_value.text = None

    summarizer = TranscriptSummarizer(client=mock_genai_client)

    assert summarizer.summarize("transcript", summary_config) == ""


def test_summarize_wraps_api_errors(mock_genai_client, summary_config):
    """Test that Gemini API errors surface as SummarizationError."""
    mock_genai_client.models.generate_content.side_effect = genai_errors.ClientError(
        400,
        {"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}},
    )

    summarizer = TranscriptSummarizer(client=mock_genai_client)

    with pytest.raises(SummarizationError) as exc_info:
        summarizer.summarize("transcript", summary_config)

    assert "API key not valid" in str(exc_info.value)
    assert exc_info.value.status_code == 400


def test_summarize_does_not_retry(mock_genai_client, summary_config):
    mock_genai_client.models.generate_content.side_effect = genai_errors.ServerError(
        503,
        {"error": {"code": 503, "message": "The model is overloaded", "status": "UNAVAILABLE"}},
    )

    summarizer = TranscriptSummarizer(client=mock_genai_client)

    with pytest.raises(SummarizationError):
        summarizer.summarize("transcript", summary_config)
    assert mock_genai_client.models.generate_content.call_count == 1
