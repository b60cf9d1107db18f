from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests


# --- Canned API responses ---

VIDEO_RESOURCE = {
    "id": "abc123",
    "snippet": {
        "title": "Best Games of the Year",
        "description": "Our top picks.",
        "channelTitle": "Game Channel",
        "tags": ["games", "top10"],
        "categoryId": "20",
        "publishedAt": "2024-01-01T00:00:00Z",
    },
    "contentDetails": {"duration": "PT10M5S", "caption": "true"},
    "statistics": {"viewCount": "300", "commentCount": "12"},
    "topicDetails": {
        "topicCategories": [
            "https://en.wikipedia.org/wiki/Video_game_culture",
            "https://en.wikipedia.org/wiki/Action_game",
        ]
    },
    "status": {"privacyStatus": "public"},
    "recordingDetails": {"location": {"latitude": 37.42, "longitude": -122.08}},
}

MINIMAL_VIDEO_RESOURCE = {"id": "min001"}


def search_item(video_id):
    return {"id": {"kind": "youtube#video", "videoId": video_id}, "snippet": {"title": video_id}}


def search_page(video_ids, next_page_token=None):
    page = {"items": [search_item(video_id) for video_id in video_ids]}
    if next_page_token:
        page["nextPageToken"] = next_page_token
    return page


def video_resource(video_id, view_count="0", caption="false"):
    return {
        "id": video_id,
        "snippet": {"title": f"Video {video_id}"},
        "contentDetails": {"duration": "PT1M", "caption": caption},
        "statistics": {"viewCount": view_count, "commentCount": "0"},
    }


def make_response(payload=None, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


def transcript_snippets(*texts):
    return [SimpleNamespace(text=text, start=float(i), duration=1.0) for i, text in enumerate(texts)]


@pytest.fixture
def mock_requests_get(mocker):
    """Patches requests.get as used by the API module."""
    return mocker.patch("youtube_search_exporter.api.requests.get")


@pytest.fixture
def mock_transcript_api(mocker):
    """Patches the transcript provider class; configure .return_value.fetch."""
    return mocker.patch("youtube_search_exporter.transcript.YouTubeTranscriptApi")
