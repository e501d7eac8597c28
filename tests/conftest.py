import pytest
from unittest.mock import MagicMock

from tubeengine.config import Settings, get_settings


requires_youtube = pytest.mark.skipif(
    not get_settings().youtube_api_key,
    reason="YouTube API key not configured: set YOUTUBE_API_KEY in .env",
)


# --- Canned API responses ---

THUMBNAILS = {
    "default": {"url": "https://i.ytimg.com/vi/abc123/default.jpg", "width": 120, "height": 90},
    "medium": {"url": "https://i.ytimg.com/vi/abc123/mqdefault.jpg", "width": 320, "height": 180},
    "high": {"url": "https://i.ytimg.com/vi/abc123/hqdefault.jpg", "width": 480, "height": 360},
}

CHANNEL_THUMBNAILS = {"default": {"url": "https://yt3.ggpht.com/chan.jpg"}}

VIDEO_SNIPPET = {
    "publishedAt": "2024-03-01T12:00:00Z",
    "channelId": "UCchan456",
    "title": "Cats being cats",
    "channelTitle": "Cat Channel",
    "thumbnails": THUMBNAILS,
}

CHANNEL_SNIPPET = {
    "publishedAt": "2015-06-10T08:30:00Z",
    "title": "Cat Channel",
    "description": "All cats, all the time",
    "thumbnails": CHANNEL_THUMBNAILS,
}

# Search results only carry what fields=items(id,snippet(title,thumbnails,channelTitle)) lets through.

SEARCH_VIDEO_ITEM = {
    "id": {"kind": "youtube#video", "videoId": "abc123"},
    "snippet": {"title": "Cats being cats", "channelTitle": "Cat Channel", "thumbnails": THUMBNAILS},
}

SEARCH_CHANNEL_ITEM = {
    "id": {"kind": "youtube#channel", "channelId": "UCchan456"},
    "snippet": {"title": "Cat Channel", "channelTitle": "Cat Channel", "thumbnails": CHANNEL_THUMBNAILS},
}

SEARCH_PLAYLIST_ITEM = {
    "id": {"kind": "youtube#playlist", "playlistId": "PL789"},
    "snippet": {"title": "A playlist"},
}

SEARCH_API_RESPONSE = {
    "items": [SEARCH_VIDEO_ITEM, SEARCH_CHANNEL_ITEM, SEARCH_PLAYLIST_ITEM],
}

VIDEOS_API_RESPONSE = {
    "kind": "youtube#videoListResponse",
    "nextPageToken": "CAUQAA",
    "items": [
        {
            "kind": "youtube#video",
            "id": "abc123",
            "snippet": VIDEO_SNIPPET,
            "contentDetails": {"duration": "PT5M30S", "dimension": "2d"},
            "statistics": {"viewCount": "1500", "likeCount": "120", "commentCount": "8"},
        },
        {"kind": "youtube#video", "snippet": {"title": "No id"}},
    ],
}

CHANNELS_API_RESPONSE = {
    "kind": "youtube#channelListResponse",
    "items": [
        {
            "kind": "youtube#channel",
            "id": "UCchan456",
            "snippet": CHANNEL_SNIPPET,
            "statistics": {"viewCount": "98000", "subscriberCount": "4200", "videoCount": "77"},
        },
    ],
}


@pytest.fixture
def mock_youtube_settings(mocker):
    return mocker.patch(
        "tubeengine.services.youtube.get_settings",
        return_value=Settings(youtube_api_key="test-key", default_max_results=10),
    )


@pytest.fixture
def mock_youtube_build(mocker):
    mock_svc = MagicMock()
    mocker.patch("tubeengine.services.youtube.build", return_value=mock_svc)
    return mock_svc


@pytest.fixture
def mock_youtube_service(mock_youtube_settings, mock_youtube_build):
    """Fully mocked YouTube Data API resource."""
    return mock_youtube_build

