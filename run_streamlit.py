"""
Launcher script for the YouTube Transcript Summarizer Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from dotenv import load_dotenv

from app.config import config

# Load environment variables
load_dotenv()


def build_command(app_path: str, port: int) -> list:
    """Build the ``streamlit run`` command line."""
    return [
        "streamlit", "run", app_path,
        "--server.port", str(port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]


def main():
    """Launch the Streamlit front end against a running API server."""
    parser = argparse.ArgumentParser(description="YouTube Transcript Summarizer Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--api-url", default=config.PUBLIC_URL,
                        help=f"URL of the API server (default: {config.PUBLIC_URL})")
    args = parser.parse_args()

    app_path = config.BASE_DIR / "app" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    env["API_URL"] = args.api_url
    # The Streamlit script imports the ``app`` package
    env["PYTHONPATH"] = str(config.BASE_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting {config.APP_NAME} Streamlit app on port {args.port}")
    print(f"API server is expected to be running at: {args.api_url}")

    try:
        subprocess.run(build_command(str(app_path), args.port), env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except subprocess.CalledProcessError as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
