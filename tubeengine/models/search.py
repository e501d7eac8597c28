from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResultType(str, Enum):
    VIDEO = "video"
    CHANNEL = "channel"


class Part(str, Enum):
    SNIPPET = "snippet"
    CONTENT_DETAILS = "contentDetails"
    STATISTICS = "statistics"


class Term(BaseModel):
    """Free-text search, with the parts wanted for each result type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["term"] = "term"
    query: str
    parts: dict[ResultType, list[Part]]

    @field_validator("parts")
    @classmethod
    def _at_least_one_type(cls, value: dict[ResultType, list[Part]]) -> dict[ResultType, list[Part]]:
        if not value:
            raise ValueError("a term search must name at least one result type")
        return value


class FromChannel(BaseModel):
    """Videos uploaded by a channel."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["from_channel"] = "from_channel"
    channel_id: str
    video_parts: list[Part] = []


class RelatedTo(BaseModel):
    """Videos related to another video."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["related_to"] = "related_to"
    video_id: str
    video_parts: list[Part] = []


SearchFilter = Annotated[Union[Term, FromChannel, RelatedTo], Field(discriminator="kind")]


class Search(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = "search"

    filter: SearchFilter
    limit: int | None = None
    page_token: str | None = None

    @property
    def result_types(self) -> list[ResultType]:
        match self.filter:
            case Term(parts=parts):
                return list(parts)
            case FromChannel() | RelatedTo():
                return [ResultType.VIDEO]

    @property
    def video_parts(self) -> list[Part]:
        match self.filter:
            case Term(parts=parts):
                return parts.get(ResultType.VIDEO, [])
            case FromChannel(video_parts=parts) | RelatedTo(video_parts=parts):
                return parts

    @property
    def channel_parts(self) -> list[Part]:
        match self.filter:
            case Term(parts=parts):
                return parts.get(ResultType.CHANNEL, [])
            case FromChannel() | RelatedTo():
                return []

    @property
    def part(self) -> Part:
        # The fields projection trims the rest, so only the snippet is asked for.
        return Part.SNIPPET


class VideoLookup(BaseModel):
    """Videos fetched by id."""

    model_config = ConfigDict(frozen=True)

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = "videos"

    ids: list[str] = Field(min_length=1)
    parts: list[Part] = Field(default=[Part.SNIPPET], min_length=1)
    limit: int | None = None
    page_token: str | None = None


class ChannelLookup(BaseModel):
    """Channels fetched by id."""

    model_config = ConfigDict(frozen=True)

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = "channels"

    ids: list[str] = Field(min_length=1)
    parts: list[Part] = Field(default=[Part.SNIPPET], min_length=1)
    limit: int | None = None
    page_token: str | None = None
