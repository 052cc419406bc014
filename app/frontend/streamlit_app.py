"""
Main Streamlit application for YouTube Transcript Summarizer.
"""

import os
import streamlit as st
from dotenv import load_dotenv

from app.frontend.api_client import ApiClient, ApiError
from app.utils.helpers import extract_video_id


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = ApiClient(os.getenv("API_URL", "http://localhost:8000"))

    if "result" not in st.session_state:
        st.session_state.result = None


def header():
    """Display the application header."""
    st.set_page_config(page_title="YouTube Transcript Summarizer", page_icon="🎬")
    st.title("🎬 YouTube Transcript Summarizer")
    st.markdown("Paste a YouTube link to get a summary of its captions.")
    st.divider()


def main():
    header()
    init_session_state()

    with st.form(key="video_summary_form"):
        url = st.text_input("YouTube Video URL", placeholder="https://www.youtube.com/watch?v=...")
        submitted = st.form_submit_button(label="Summarize")

    if submitted:
        video_id = extract_video_id(url)
        if not video_id:
            st.error("Please provide a valid YouTube video URL.")
            return

        try:
            with st.spinner("Fetching transcript and generating summary..."):
                st.session_state.result = st.session_state.api_client.summarize_video(video_id)
        except ApiError as e:
            st.session_state.result = None
            st.error(e.message if not e.details else f"{e.message}: {e.details}")
        except Exception as e:
            st.session_state.result = None
            st.error(f"Error processing video: {str(e)}")

    result = st.session_state.result
    if result:
        st.subheader("Summary")
        st.write(result["summary"])
        with st.expander("Transcript"):
            st.write(result["transcript"])


if __name__ == "__main__":
    main()
