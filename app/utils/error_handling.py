"""
Centralized error handling for the application.
"""

import traceback
from typing import Optional, Tuple

from google.genai import errors as genai_errors

from app.api.schems import ErrorResponse
from app.utils.logger import logging

# Wording shared with the caption library's "no transcript" failures. Errors
# raised outside this package are still matched on it.
NO_TRANSCRIPT_MARKER = "Could not get transcripts"


class MissingInput(ValueError):
    """Raised when no usable video id was supplied."""


class TranscriptUnavailable(Exception):
    """Raised when no captions could be retrieved for a video."""

    def __init__(self, message: str = f"{NO_TRANSCRIPT_MARKER} for this video"):
        super().__init__(message)
        self.message = message


class ProxyPathFailure(Exception):
    """Raised by the proxied caption scraper. Always recovered by falling back."""


class SummarizationError(Exception):
    """Raised when the Gemini API rejects or fails a generation request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def is_provider_error(error: Exception) -> bool:
    return isinstance(error, (SummarizationError, genai_errors.APIError))


def is_transcript_unavailable(error: Exception) -> bool:
    return isinstance(error, TranscriptUnavailable) or NO_TRANSCRIPT_MARKER in str(error)


def _error_message(error: Exception) -> str:
    message = getattr(error, "message", None)
    return message if isinstance(message, str) and message else str(error)


def error_response_for(error: Exception) -> Tuple[int, ErrorResponse]:
    """
    Map an exception raised while serving a request to an HTTP response.

    Args:
        error: The exception caught by the request handler

    Returns:
        Tuple of (status code, error body)
    """
    if is_provider_error(error):
        return 500, ErrorResponse(error=f"Gemini API error: {_error_message(error)}")

    if is_transcript_unavailable(error):
        return 404, ErrorResponse(error="Transcript not available for this video")

    return 500, ErrorResponse(error="Internal server error", details=str(error))


def log_error_context(video_id: Optional[str], error: Exception) -> None:
    """
    Log diagnostic information about a failed request.

    Never raises; a logging failure must not change the response.

    Args:
        video_id: ID of the video being processed
        error: The exception that occurred
    """
    try:
        stack = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        logging.error(
            "Error occurred: "
            f"video_id={video_id} "
            f"message={_error_message(error)!r} "
            f"name={type(error).__name__} "
            f"is_gemini_error={is_provider_error(error)}\n{stack}"
        )
    except Exception as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
