"""Decode YouTube Data API JSON into typed records.

Each ``decode_*`` function takes a JSON node (``None`` when the node is
absent) and returns a record or ``None``. Nothing here raises on malformed
input: a bad optional field becomes ``None`` and only a missing id drops the
whole resource.
"""

import re
from datetime import datetime, timedelta
from typing import Any

from pydantic import TypeAdapter, ValidationError

from tubeengine.models.search import Part
from tubeengine.models.youtube import (
    Channel,
    ChannelItem,
    ChannelPage,
    ChannelSnippet,
    ChannelStatistics,
    Image,
    SearchItem,
    SearchPage,
    Video,
    VideoContentDetails,
    VideoItem,
    VideoPage,
    VideoSnippet,
    VideoStatistics,
)

VIDEO_KIND = "youtube#video"
CHANNEL_KIND = "youtube#channel"

_datetime = TypeAdapter(datetime)
_duration = TypeAdapter(timedelta)

# Only the formats the API emits; the adapters on their own are lax.
RFC3339_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})", re.ASCII)
ISO_DURATION_RE = re.compile(r"P(?=\d|T\d)(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?", re.ASCII)
INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _node(json: Any, key: str) -> Any:
    if isinstance(json, dict):
        return json.get(key)
    return None


def _string(json: Any, key: str) -> str | None:
    value = _node(json, key)
    return value if isinstance(value, str) else None


def _int(json: Any, key: str) -> int | None:
    """Counts arrive as strings; plain ints are accepted too."""
    value = _node(json, key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER_RE.fullmatch(value):
        return int(value)
    return None


def _date(json: Any, key: str) -> datetime | None:
    value = _string(json, key)
    if value is None or not RFC3339_RE.fullmatch(value):
        return None
    try:
        return _datetime.validate_python(value)
    except ValidationError:
        return None


def _thumbnails(json: Any) -> tuple[Image | None, Image | None, Image | None]:
    thumbnails = _node(json, "thumbnails")
    return (
        decode_image(_node(thumbnails, "default")),
        decode_image(_node(thumbnails, "medium")),
        decode_image(_node(thumbnails, "high")),
    )


def decode_image(json: Any) -> Image | None:
    url = _string(json, "url")
    if url is None:
        return None
    return Image(url=url, width=_int(json, "width"), height=_int(json, "height"))


def decode_video_snippet(json: Any) -> VideoSnippet | None:
    if not isinstance(json, dict):
        return None
    default_image, medium_image, high_image = _thumbnails(json)
    return VideoSnippet(
        title=_string(json, "title"),
        publish_date=_date(json, "publishedAt"),
        channel_id=_string(json, "channelId"),
        channel_title=_string(json, "channelTitle"),
        default_image=default_image,
        medium_image=medium_image,
        high_image=high_image,
    )


def decode_video_statistics(json: Any) -> VideoStatistics | None:
    if json is None:
        return None
    return VideoStatistics(
        views=_int(json, "viewCount"),
        likes=_int(json, "likeCount"),
        dislikes=_int(json, "dislikeCount"),
    )


def decode_video_content_details(json: Any) -> VideoContentDetails | None:
    duration = _string(json, "duration")
    if duration is None or not ISO_DURATION_RE.fullmatch(duration):
        return None
    try:
        return VideoContentDetails(duration=_duration.validate_python(duration))
    except ValidationError:
        return None


def decode_video(json: Any) -> Video | None:
    video_id = _string(json, "id")
    if video_id is None:
        return None
    return Video(
        id=video_id,
        snippet=decode_video_snippet(_node(json, Part.SNIPPET.value)),
        content_details=decode_video_content_details(_node(json, Part.CONTENT_DETAILS.value)),
        statistics=decode_video_statistics(_node(json, Part.STATISTICS.value)),
    )


def decode_channel_snippet(json: Any) -> ChannelSnippet | None:
    if not isinstance(json, dict):
        return None
    default_image, medium_image, high_image = _thumbnails(json)
    return ChannelSnippet(
        title=_string(json, "title"),
        description=_string(json, "description"),
        publish_date=_date(json, "publishedAt"),
        default_image=default_image,
        medium_image=medium_image,
        high_image=high_image,
    )


def decode_channel_statistics(json: Any) -> ChannelStatistics | None:
    if json is None:
        return None
    return ChannelStatistics(
        views=_int(json, "viewCount"),
        subscribers=_int(json, "subscriberCount"),
        videos=_int(json, "videoCount"),
    )


def decode_channel(json: Any) -> Channel | None:
    channel_id = _string(json, "id")
    if channel_id is None:
        return None
    return Channel(
        id=channel_id,
        snippet=decode_channel_snippet(_node(json, Part.SNIPPET.value)),
        statistics=decode_channel_statistics(_node(json, Part.STATISTICS.value)),
    )


def decode_search_item(json: Any) -> SearchItem | None:
    """Pick the variant from ``id.kind``; search results nest the real id there."""
    resource_id = _node(json, "id")
    kind = _string(resource_id, "kind")
    if kind == VIDEO_KIND:
        video = decode_video({**json, "id": _string(resource_id, "videoId")})
        return VideoItem(video=video) if video is not None else None
    if kind == CHANNEL_KIND:
        channel = decode_channel({**json, "id": _string(resource_id, "channelId")})
        return ChannelItem(channel=channel) if channel is not None else None
    return None


def payload_items(payload: Any) -> list:
    items = _node(payload, "items")
    return items if isinstance(items, list) else []


def decode_search_items(payload: Any) -> list[SearchItem]:
    decoded = (decode_search_item(item) for item in payload_items(payload))
    return [item for item in decoded if item is not None]


def decode_search_page(payload: Any) -> SearchPage:
    return SearchPage(items=decode_search_items(payload))


def decode_video_page(payload: Any) -> VideoPage:
    decoded = (decode_video(item) for item in payload_items(payload))
    return VideoPage(
        items=[video for video in decoded if video is not None],
        next_page_token=_string(payload, "nextPageToken"),
    )


def decode_channel_page(payload: Any) -> ChannelPage:
    decoded = (decode_channel(item) for item in payload_items(payload))
    return ChannelPage(
        items=[channel for channel in decoded if channel is not None],
        next_page_token=_string(payload, "nextPageToken"),
    )
