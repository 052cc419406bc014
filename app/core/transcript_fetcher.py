"""
Module for fetching YouTube caption tracks.

Captions are read through ``youtube-transcript-api``. When an outbound proxy
is configured, the public timed-text endpoint is scraped through the proxy
first and the library is used as a fallback.
"""

import re
from typing import Iterable, List, Optional
from urllib.parse import unquote

import requests
from youtube_transcript_api import (
    YouTubeTranscriptApi,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
)

from app.models.schemas import CaptionEntry
from app.utils.error_handling import (
    NO_TRANSCRIPT_MARKER,
    ProxyPathFailure,
    TranscriptUnavailable,
)
from app.utils.logger import logging

# Library errors meaning the video has no usable captions. Blocked or failed
# requests are not in this list and propagate unchanged.
NO_CAPTIONS_ERRORS = (TranscriptsDisabled, NoTranscriptFound, VideoUnavailable)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
TIMEDTEXT_URL = "https://www.youtube.com/api/timedtext?v={video_id}&lang={language}"

# Best-effort scraper, not an XML parser: entities are left alone and
# anything that does not match this exact shape is skipped.
TIMEDTEXT_PATTERN = re.compile(r'<text start="([\d.]+)" dur="([\d.]+)">(.*?)</text>', re.ASCII)
_LEADING_NUMBER = re.compile(r"\d*(?:\.\d*)?", re.ASCII)
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _parse_seconds(value: str) -> float:
    """Parse the leading decimal number of ``value`` ("1.2.3" -> 1.2)."""
    number = _LEADING_NUMBER.match(value).group(0)
    if not any(char.isdigit() for char in number):
        return float("nan")
    return float(number)


def _decode_caption_text(text: str) -> str:
    """
    URL-decode caption text after turning ``+`` into spaces.

    Raises:
        ValueError: On a ``%`` not followed by two hex digits, or escapes
            that do not form valid UTF-8
    """
    text = text.replace("+", " ")
    if _MALFORMED_ESCAPE.search(text):
        raise ValueError(f"Malformed percent-encoding in caption text: {text!r}")
    return unquote(text, errors="strict")


def parse_timedtext_xml(xml_data: str) -> List[CaptionEntry]:
    """
    Extract caption entries from a timed-text XML document.

    Args:
        xml_data: Raw response body of the timed-text endpoint

    Returns:
        Caption entries in document order
    """
    entries = []
    for match in TIMEDTEXT_PATTERN.finditer(xml_data):
        start, duration, text = match.groups()
        entries.append(CaptionEntry(
            offset_ms=_parse_seconds(start) * 1000,
            duration_ms=_parse_seconds(duration) * 1000,
            text=_decode_caption_text(text),
        ))
    return entries


def join_transcript_text(entries: Iterable[CaptionEntry]) -> str:
    """Join caption texts with single spaces, preserving order."""
    return " ".join(entry.text for entry in entries)


class LibraryCaptionSource:
    """Caption source backed by youtube-transcript-api."""

    name = "youtube-transcript-api"

    def __init__(self, language: str = "en", api: Optional[YouTubeTranscriptApi] = None):
        self.language = language
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> List[CaptionEntry]:
        try:
            fetched = self.api.fetch(video_id, languages=[self.language])
        except NO_CAPTIONS_ERRORS as e:
            raise TranscriptUnavailable(
                f"{NO_TRANSCRIPT_MARKER} for this video ({video_id}): {e.__class__.__name__}"
            ) from e

        return [
            CaptionEntry(
                offset_ms=snippet.start * 1000,
                duration_ms=snippet.duration * 1000,
                text=snippet.text,
            )
            for snippet in fetched
        ]


class ProxyCaptionSource:
    """Caption source that scrapes the timed-text endpoint through a proxy."""

    name = "timedtext-proxy"

    def __init__(
        self,
        proxy_url: str,
        language: str = "en",
        session: Optional[requests.Session] = None,
    ):
        self.proxy_url = proxy_url
        self.language = language
        self.session = session or requests.Session()
        self.session.proxies.update({"http": proxy_url, "https": proxy_url})

    def fetch(self, video_id: str) -> List[CaptionEntry]:
        # Availability probe; the watch page itself is not used.
        probe = self.session.get(WATCH_URL.format(video_id=video_id))
        probe.raise_for_status()

        response = self.session.get(
            TIMEDTEXT_URL.format(video_id=video_id, language=self.language)
        )
        response.raise_for_status()

        if not response.text:
            raise TranscriptUnavailable()

        entries = parse_timedtext_xml(response.text)
        if not entries:
            raise ProxyPathFailure(f"No caption elements found for video {video_id}")

        return entries


class TranscriptFetcher:
    """Tries each caption source in order until one succeeds."""

    def __init__(self, sources: List):
        """
        Initialize the fetcher with an ordered list of caption sources.

        Args:
            sources: Objects exposing ``name`` and ``fetch(video_id)``. Only
                a failure of the last source is surfaced to the caller.
        """
        if not sources:
            raise ValueError("At least one caption source is required.")
        self.sources = list(sources)

    @classmethod
    def from_settings(cls, proxy_url: Optional[str] = None, language: str = "en") -> "TranscriptFetcher":
        """Build the fetcher for the given proxy setting."""
        library = LibraryCaptionSource(language=language)
        if not proxy_url:
            return cls([library])
        return cls([ProxyCaptionSource(proxy_url, language=language), library])

    @property
    def uses_proxy(self) -> bool:
        return any(isinstance(source, ProxyCaptionSource) for source in self.sources)

    def fetch_transcript(self, video_id: str) -> List[CaptionEntry]:
        """
        Fetch the caption track for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            Caption entries as returned by the first source that succeeds

        Raises:
            TranscriptUnavailable: If the last source finds no captions
        """
        last_index = len(self.sources) - 1
        for index, source in enumerate(self.sources):
            try:
                return source.fetch(video_id)
            except Exception as e:
                if index == last_index:
                    raise
                logging.error(f"Error fetching transcript with {source.name}: {str(e)}")
                logging.info(f"Falling back to {self.sources[index + 1].name} for video {video_id}")
