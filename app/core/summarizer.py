"""
Module for summarizing transcripts using Gemini models.
"""

from typing import Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.config import config
from app.core.prompts import build_summary_prompt
from app.models.schemas import SummaryConfig
from app.utils.error_handling import SummarizationError
from app.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, api_key: Optional[str] = None, client: Optional[genai.Client] = None):
        """
        Initialize the summarizer with API key.

        Args:
            api_key: Gemini API key (if None, will try to get from environment)
            client: Pre-built Gemini client, mainly for tests
        """
        self.api_key = api_key or config.GEMINI_KEY
        if client is None and not self.api_key:
            raise ValueError("Gemini API key is required. Set GEMINI_KEY in .env file or pass directly.")

        self.client = client or genai.Client(api_key=self.api_key)

    def _generation_config(self, summary_config: SummaryConfig) -> Optional[types.GenerateContentConfig]:
        if summary_config.temperature is None and summary_config.max_tokens is None:
            return None
        return types.GenerateContentConfig(
            temperature=summary_config.temperature,
            max_output_tokens=summary_config.max_tokens,
        )

    def summarize(self, transcript_text: str, summary_config: Optional[SummaryConfig] = None) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize
            summary_config: Configuration for summarization

        Returns:
            Generated summary text

        Raises:
            SummarizationError: If the Gemini API call fails
        """
        summary_config = summary_config or SummaryConfig()
        prompt = build_summary_prompt(transcript_text)

        logging.info(f"Requesting summary from {summary_config.model} ({len(transcript_text)} characters of transcript)")
        try:
            response = self.client.models.generate_content(
                model=summary_config.model,
                contents=prompt,
                config=self._generation_config(summary_config),
            )
        except genai_errors.APIError as e:
            raise SummarizationError(e.message or str(e), status_code=e.code) from e

        return response.text or ""
