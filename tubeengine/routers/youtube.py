from fastapi import APIRouter, Query

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
from tubeengine.models.youtube import ChannelPage, SearchPage, VideoPage
from tubeengine.services import youtube as youtube_service

router = APIRouter(prefix="/api/youtube", tags=["youtube"])


@router.get("/search")
def search(
    query: str,
    types: list[ResultType] = Query([ResultType.VIDEO]),
    max_results: int | None = None,
    page_token: str | None = None,
) -> SearchPage:
    parts = {result_type: [Part.SNIPPET] for result_type in types}
    return youtube_service.search(Search(
        filter=Term(query=query, parts=parts), limit=max_results, page_token=page_token,
    ))


@router.get("/channels/{channel_id}/videos")
def channel_videos(channel_id: str, max_results: int | None = None, page_token: str | None = None) -> SearchPage:
    return youtube_service.search(Search(
        filter=FromChannel(channel_id=channel_id, video_parts=[Part.SNIPPET]),
        limit=max_results,
        page_token=page_token,
    ))


@router.get("/videos/{video_id}/related")
def related_videos(video_id: str, max_results: int | None = None, page_token: str | None = None) -> SearchPage:
    return youtube_service.search(Search(
        filter=RelatedTo(video_id=video_id, video_parts=[Part.SNIPPET]),
        limit=max_results,
        page_token=page_token,
    ))


@router.get("/videos")
def get_videos(ids: list[str] = Query(), parts: list[Part] = Query([Part.SNIPPET])) -> VideoPage:
    return youtube_service.get_videos(VideoLookup(ids=ids, parts=parts))


@router.get("/channels")
def get_channels(ids: list[str] = Query(), parts: list[Part] = Query([Part.SNIPPET])) -> ChannelPage:
    return youtube_service.get_channels(ChannelLookup(ids=ids, parts=parts))
