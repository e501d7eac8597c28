import logging

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from tubeengine.config import get_settings
from tubeengine.exceptions import AuthenticationError, IntegrationError, RateLimitError
from tubeengine.models.search import ChannelLookup, Part, ResultType, Search, Term, VideoLookup
from tubeengine.models.youtube import ChannelPage, SearchPage, VideoPage
from tubeengine.services.parser import decode_channel_page, decode_search_page, decode_video_page, payload_items
from tubeengine.services.request_builder import build_parameters

logger = logging.getLogger(__name__)

MAX_RESULTS_CAP = 50


def _get_youtube_service():
    key = get_settings().youtube_api_key
    if not key:
        raise AuthenticationError(
            "YouTube API key not configured. Create one in the Google Cloud console and set YOUTUBE_API_KEY in .env"
        )
    return build("youtube", "v3", developerKey=key, cache_discovery=False)


def _handle_api_error(e: HttpError):
    content = e.content or b""
    if e.resp.status == 429 or b"quotaExceeded" in content or b"rateLimitExceeded" in content:
        raise RateLimitError("YouTube API rate limit or quota exceeded. Try again later.") from e
    if e.resp.status in (401, 403):
        raise AuthenticationError("YouTube API key is invalid or not allowed. Check YOUTUBE_API_KEY in .env.") from e
    raise IntegrationError(f"YouTube API error: {e}") from e


def _execute(request: Search | VideoLookup | ChannelLookup) -> dict:
    """Issue the GET for ``request.path`` with its built parameters and return the raw JSON."""
    params = build_parameters(request)
    service = _get_youtube_service()
    logger.debug("%s %s %s", request.method, request.path, params)
    try:
        return getattr(service, request.path)().list(**params).execute(num_retries=3)
    except HttpError as e:
        _handle_api_error(e)


def search(request: Search) -> SearchPage:
    """Run a search and decode one page of results."""
    payload = _execute(request)
    page = decode_search_page(payload)
    dropped = len(payload_items(payload)) - len(page.items)
    if dropped:
        logger.debug("Dropped %d undecodable search items", dropped)
    return page


def get_videos(lookup: VideoLookup) -> VideoPage:
    """Fetch videos by id with the requested parts."""
    return decode_video_page(_execute(lookup))


def get_channels(lookup: ChannelLookup) -> ChannelPage:
    """Fetch channels by id with the requested parts."""
    return decode_channel_page(_execute(lookup))


def search_videos(query: str, max_results: int | None = None, page_token: str | None = None) -> SearchPage:
    """Search YouTube for videos matching a free-text query."""
    if max_results is None:
        max_results = get_settings().default_max_results
    return search(Search(
        filter=Term(query=query, parts={ResultType.VIDEO: [Part.SNIPPET]}),
        limit=min(max_results, MAX_RESULTS_CAP),
        page_token=page_token,
    ))
