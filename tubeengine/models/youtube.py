from datetime import datetime, timedelta
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Image(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    width: int | None = None
    height: int | None = None


class VideoSnippet(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    publish_date: datetime | None = None
    channel_id: str | None = None
    channel_title: str | None = None
    default_image: Image | None = None
    medium_image: Image | None = None
    high_image: Image | None = None


class VideoStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    views: int | None = None
    likes: int | None = None
    dislikes: int | None = None


class VideoContentDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    duration: timedelta


class Video(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    snippet: VideoSnippet | None = None
    content_details: VideoContentDetails | None = None
    statistics: VideoStatistics | None = None


class ChannelSnippet(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    publish_date: datetime | None = None
    default_image: Image | None = None
    medium_image: Image | None = None
    high_image: Image | None = None


class ChannelStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    views: int | None = None
    subscribers: int | None = None
    videos: int | None = None


class Channel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    snippet: ChannelSnippet | None = None
    statistics: ChannelStatistics | None = None


class VideoItem(BaseModel):
    """A search hit that is a video."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["video"] = "video"
    video: Video

    @property
    def channel(self) -> None:
        return None


class ChannelItem(BaseModel):
    """A search hit that is a channel."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["channel"] = "channel"
    channel: Channel

    @property
    def video(self) -> None:
        return None


SearchItem = Annotated[Union[VideoItem, ChannelItem], Field(discriminator="kind")]


class SearchPage(BaseModel):
    """One page of search hits. The search fields projection leaves out nextPageToken."""

    items: list[SearchItem] = []


class VideoPage(BaseModel):
    items: list[Video] = []
    next_page_token: str | None = None


class ChannelPage(BaseModel):
    items: list[Channel] = []
    next_page_token: str | None = None
