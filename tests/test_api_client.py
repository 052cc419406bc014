"""
Tests for the frontend API client.
"""

import pytest
from unittest.mock import MagicMock

from app.frontend.api_client import ApiClient, ApiError


@pytest.fixture
def mock_session():
    """Fixture to mock a requests session."""
    return MagicMock()


def make_response(status_code, body=None, reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    return response


def test_summarize_video(mock_session):
    mock_session.get.return_value = make_response(200, {"summary": "Short.", "transcript": "long text"})

    client = ApiClient("http://localhost:8000", session=mock_session)
    result = client.summarize_video("V3TUEeB0kW0")

    mock_session.get.assert_called_once_with(
        "http://localhost:8000/api/transcript", params={"videoId": "V3TUEeB0kW0"}
    )
    assert result == {"summary": "Short.", "transcript": "long text"}


def test_summarize_video_error(mock_session):
    mock_session.get.return_value = make_response(
        404, {"error": "Transcript not available for this video"}, reason="Not Found"
    )

    client = ApiClient("http://localhost:8000", session=mock_session)

    with pytest.raises(ApiError) as exc_info:
        client.summarize_video("V3TUEeB0kW0")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Transcript not available for this video"
    assert exc_info.value.details is None


def test_summarize_video_error_details(mock_session):
    mock_session.get.return_value = make_response(
        500, {"error": "Internal server error", "details": "boom"}, reason="Internal Server Error"
    )

    client = ApiClient("http://localhost:8000", session=mock_session)

    with pytest.raises(ApiError) as exc_info:
        client.summarize_video("V3TUEeB0kW0")

    assert exc_info.value.details == "boom"


def test_summarize_video_non_json_error(mock_session):
    mock_session.get.return_value = make_response(502, reason="Bad Gateway")

    client = ApiClient("http://localhost:8000", session=mock_session)

    with pytest.raises(ApiError) as exc_info:
        client.summarize_video("V3TUEeB0kW0")

    assert exc_info.value.message == "Bad Gateway"
