"""
Helper utility functions for the YouTube transcript summarization application.
"""

import json
import re
from typing import Dict, Any, Optional

# YouTube URL patterns
VIDEO_ID_PATTERNS = [
    r"(?:v=|\/)([0-9A-Za-z_-]{11}).*",  # Standard, shortened and shorts
    r"(?:embed\/)([0-9A-Za-z_-]{11})",  # Embedded videos
    r"(?:watch\?v=)([0-9A-Za-z_-]{11})",  # Standard watch URL
]
BARE_VIDEO_ID = re.compile(r"^[0-9A-Za-z_-]{11}$")


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL or a bare video ID.

    Args:
        url: YouTube URL or 11-character video ID

    Returns:
        Video ID or None if extraction fails
    """
    url = (url or "").strip()
    if BARE_VIDEO_ID.match(url):
        return url

    for pattern in VIDEO_ID_PATTERNS:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    return None


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)
