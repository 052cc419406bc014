"""
Command line entry point for the YouTube Transcript Summarizer application.
"""

import argparse
from pathlib import Path
from typing import Optional

from app.models.schemas import SummaryConfig, VideoSummary
from app.core.transcript_fetcher import TranscriptFetcher, join_transcript_text
from app.core.summarizer import TranscriptSummarizer
from app.config import config
from app.utils.error_handling import MissingInput, TranscriptUnavailable
from app.utils.helpers import extract_video_id, save_json
from app.utils.logger import logging


def save_summary(summary: VideoSummary, output_file: Optional[str] = None) -> Path:
    """Save the summary to a JSON file."""
    if output_file is None:
        output_dir = Path(config.SUMMARIES_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{summary.video_id}_summary.json"
    else:
        output_file = Path(output_file)

    save_json(summary.model_dump(), str(output_file))

    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_youtube_video(
    url: str,
    model: str = config.DEFAULT_SUMMARY_MODEL,
    temperature: Optional[float] = config.SUMMARY_TEMPERATURE,
    max_tokens: Optional[int] = config.SUMMARY_MAX_TOKENS,
    fetcher: Optional[TranscriptFetcher] = None,
    summarizer: Optional[TranscriptSummarizer] = None,
) -> VideoSummary:
    """
    Fetch the captions of a YouTube video and summarize them.

    Args:
        url: YouTube video URL or video ID
        model: Gemini model to use for summarization
        temperature: Sampling temperature (model default if None)
        max_tokens: Output token limit (model default if None)
        fetcher: Transcript fetcher (built from config if None)
        summarizer: Transcript summarizer (built from config if None)

    Returns:
        VideoSummary object
    """
    video_id = extract_video_id(url)
    if not video_id:
        raise MissingInput(f"Could not extract a video ID from: {url}")

    fetcher = fetcher or TranscriptFetcher.from_settings(
        proxy_url=config.PROXY_URL,
        language=config.TRANSCRIPT_LANGUAGE,
    )
    summarizer = summarizer or TranscriptSummarizer()

    logging.info(f"Fetching transcript for video: {video_id}")
    captions = fetcher.fetch_transcript(video_id)
    if not captions:
        raise TranscriptUnavailable("No transcript available")

    transcript_text = join_transcript_text(captions)

    logging.info("Generating summary...")
    summary_config = SummaryConfig(model=model, temperature=temperature, max_tokens=max_tokens)
    summary = summarizer.summarize(transcript_text, summary_config)

    return VideoSummary(
        video_id=video_id,
        summary=summary,
        transcript_text=transcript_text,
        captions=captions,
    )


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Transcript Summarizer")
    parser.add_argument("url", help="YouTube video URL or video ID")
    parser.add_argument("--model", default=config.DEFAULT_SUMMARY_MODEL,
                        help="Gemini model for summarization")
    parser.add_argument("--temperature", type=float, default=config.SUMMARY_TEMPERATURE,
                        help="Sampling temperature for the summary")
    parser.add_argument("--max-tokens", type=int, default=config.SUMMARY_MAX_TOKENS,
                        help="Maximum number of tokens in the summary")
    parser.add_argument("--output", help="Output file path for the summary")

    args = parser.parse_args()

    config.initialize()

    summary = summarize_youtube_video(
        args.url,
        model=args.model,
        temperature=args.temperature,
        max_tokens=args.max_tokens,
    )
    save_summary(summary, args.output)

    # Print the summary
    print("\n" + "=" * 80)
    print(f"Summary of video {summary.video_id}")
    print("=" * 80)
    print(summary.summary)
    print("=" * 80)


if __name__ == "__main__":
    main()
