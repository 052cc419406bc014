summary_template = """
    You are an advanced AI designed to interpret video transcripts and generate detailed summaries.
    Do not use any markdown syntax; instead, write headings plainly, e.g., "Introduction".

    Task Instructions:
    - Review the video transcript.
    - Craft a 4-5 paragraph summary including purpose, highlights, and insights.

    Transcript: {transcript}
    """


def build_summary_prompt(transcript_text: str) -> str:
    return summary_template.format(transcript=transcript_text)
