"""
API client for communicating with the YouTube Transcript Summarizer backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin
from app.config import config


class ApiError(Exception):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, message: str, details: Optional[str] = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.details = details


class ApiClient:
    """Client for interacting with the YouTube Transcript Summarizer API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, session: Optional[requests.Session] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            session: Optional requests session to reuse
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.session = session or requests.Session()

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def summarize_video(self, video_id: str) -> Dict[str, Any]:
        """
        Request the transcript and summary of a video.

        Args:
            video_id: YouTube video ID

        Returns:
            Dictionary with ``summary`` and ``transcript``

        Raises:
            ApiError: If the server answers with an error status
        """
        response = self.session.get(self._url("transcript"), params={"videoId": video_id})

        if response.status_code != 200:
            try:
                body = response.json()
            except ValueError:
                body = {}
            raise ApiError(
                response.status_code,
                body.get("error") or response.reason or "Request failed",
                body.get("details"),
            )

        return response.json()
