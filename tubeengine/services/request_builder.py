"""Turn typed requests into YouTube Data API query parameters.

Every builder is total: optional values are left out of the mapping rather
than sent empty, and nothing here performs I/O.
"""

from enum import Enum

from tubeengine.models.search import (
    ChannelLookup,
    FromChannel,
    RelatedTo,
    Search,
    Term,
    VideoLookup,
)

SEARCH_FIELDS = "items(id,snippet(title,thumbnails,channelTitle))"


def _join(values) -> str:
    # Order kept, duplicates dropped.
    return ",".join(dict.fromkeys(v.value if isinstance(v, Enum) else v for v in values))


def _paging(limit: int | None, page_token: str | None) -> dict[str, str]:
    params = {}
    if limit is not None:
        params["maxResults"] = str(limit)
    if page_token is not None:
        params["pageToken"] = page_token
    return params


def build_search_parameters(search: Search) -> dict[str, str]:
    params = {
        "part": search.part.value,
        "type": _join(search.result_types),
        **_paging(search.limit, search.page_token),
        "fields": SEARCH_FIELDS,
    }
    match search.filter:
        case Term(query=query):
            params["q"] = query
        case FromChannel(channel_id=channel_id):
            params["channelId"] = channel_id
        case RelatedTo(video_id=video_id):
            params["videoId"] = video_id
    return params


def build_video_parameters(lookup: VideoLookup) -> dict[str, str]:
    return {
        "part": _join(lookup.parts),
        "id": _join(lookup.ids),
        **_paging(lookup.limit, lookup.page_token),
    }


def build_channel_parameters(lookup: ChannelLookup) -> dict[str, str]:
    return {
        "part": _join(lookup.parts),
        "id": _join(lookup.ids),
        **_paging(lookup.limit, lookup.page_token),
    }


def build_parameters(request: Search | VideoLookup | ChannelLookup) -> dict[str, str]:
    """Dispatch to the builder matching the request type."""
    match request:
        case Search():
            return build_search_parameters(request)
        case VideoLookup():
            return build_video_parameters(request)
        case ChannelLookup():
            return build_channel_parameters(request)
    raise TypeError(f"Unsupported request: {type(request).__name__}")
