from fastmcp import FastMCP

from tubeengine.exceptions import AuthenticationError, IntegrationError, RateLimitError
from tubeengine.models.search import (
    ChannelLookup,
    FromChannel,
    Part,
    RelatedTo,
    ResultType,
    Search,
    Term,
    VideoLookup,
)
from tubeengine.services import youtube as youtube_service

mcp = FastMCP("Tubeengine")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, AuthenticationError):
        return {"error": "auth_error", "message": str(e), "action": "Ask user to set YOUTUBE_API_KEY"}
    if isinstance(e, RateLimitError):
        return {"error": "rate_limit", "message": str(e), "action": "Wait a while and retry"}
    if isinstance(e, IntegrationError):
        return {"error": "integration_error", "message": str(e)}
    return {"error": "unknown_error", "message": str(e)}


def _page(page) -> dict:
    return {**page.model_dump(mode="json"), "count": len(page.items)}


@mcp.tool
def youtube_search(query: str, include_channels: bool = False, max_results: int = 10, page_token: str | None = None) -> dict:
    """Search YouTube. Returns videos (and channels when include_channels is true) with title and thumbnails.
    Search results carry no next-page token; page_token only forwards a token obtained elsewhere."""
    parts = {ResultType.VIDEO: [Part.SNIPPET]}
    if include_channels:
        parts[ResultType.CHANNEL] = [Part.SNIPPET]
    try:
        return _page(youtube_service.search(Search(
            filter=Term(query=query, parts=parts), limit=max_results, page_token=page_token,
        )))
    except (AuthenticationError, IntegrationError, RateLimitError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def youtube_channel_videos(channel_id: str, max_results: int = 10, page_token: str | None = None) -> dict:
    """List videos uploaded by a channel."""
    try:
        return _page(youtube_service.search(Search(
            filter=FromChannel(channel_id=channel_id), limit=max_results, page_token=page_token,
        )))
    except (AuthenticationError, IntegrationError, RateLimitError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def youtube_related_videos(video_id: str, max_results: int = 10, page_token: str | None = None) -> dict:
    """List videos related to a given video."""
    try:
        return _page(youtube_service.search(Search(
            filter=RelatedTo(video_id=video_id), limit=max_results, page_token=page_token,
        )))
    except (AuthenticationError, IntegrationError, RateLimitError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def youtube_get_videos(video_ids: list[str]) -> dict:
    """Get snippet, duration and view/like counts for one or more videos by id.
    Use this after youtube_search to get details the search results leave out."""
    try:
        return _page(youtube_service.get_videos(VideoLookup(
            ids=video_ids, parts=[Part.SNIPPET, Part.CONTENT_DETAILS, Part.STATISTICS],
        )))
    except (AuthenticationError, IntegrationError, RateLimitError) as e:
        return _handle_mcp_error(e)


@mcp.tool
def youtube_get_channels(channel_ids: list[str]) -> dict:
    """Get title, description and subscriber/video counts for one or more channels by id."""
    try:
        return _page(youtube_service.get_channels(ChannelLookup(
            ids=channel_ids, parts=[Part.SNIPPET, Part.STATISTICS],
        )))
    except (AuthenticationError, IntegrationError, RateLimitError) as e:
        return _handle_mcp_error(e)
