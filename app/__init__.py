"""
YouTube Transcript Summarization Application.

This application fetches the caption track of a YouTube video and
generates a prose summary of it with Google's Gemini models.
"""

from app.config import config

__version__ = config.APP_VERSION
