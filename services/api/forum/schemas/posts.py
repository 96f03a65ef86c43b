"""Schemas for the post and reply endpoints (/api/posts)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Request body for POST /api/posts. Every field may be omitted."""

    heading: str | None = None
    content: str | None = None
    hashtag: str | None = None
    image_url: str | None = Field(alias="imageUrl", default=None)

    model_config = ConfigDict(populate_by_name=True)


class VoteRequest(BaseModel):
    """Request body for POST /api/posts/{id}/vote.

    voteType is checked by the post service, not here, so an unknown
    value is reported as INVALID_VOTE_TYPE rather than a schema error.
    """

    vote_type: str | None = Field(alias="voteType", default=None)

    model_config = ConfigDict(populate_by_name=True)


class ReplyCreate(BaseModel):
    """Request body for POST /api/posts/{id}/replies."""

    content: str | None = None


class PostOut(BaseModel):
    """A stored post."""

    id: int
    heading: str | None
    content: str | None
    hashtag: str | None
    image_url: str | None = Field(alias="imageUrl")
    upvotes: int
    downvotes: int
    replies_count: int = Field(alias="repliesCount")
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class ReplyOut(BaseModel):
    """A stored reply."""

    id: int
    post_id: int
    content: str | None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class PostResponse(BaseModel):
    message: str = "success"
    data: PostOut


class PostListResponse(BaseModel):
    message: str = "success"
    data: list[PostOut]


class ReplyResponse(BaseModel):
    message: str = "success"
    data: ReplyOut


class ReplyListResponse(BaseModel):
    message: str = "success"
    data: list[ReplyOut]


class UploadResponse(BaseModel):
    """Response payload for POST /api/upload."""

    image_url: str = Field(alias="imageUrl")

    model_config = ConfigDict(populate_by_name=True)
