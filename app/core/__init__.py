"""
Core functionality for the YouTube transcript summarization application.

This package contains modules for fetching caption tracks and
summarizing transcripts.
"""
