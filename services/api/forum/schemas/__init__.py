"""Pydantic schemas for API request/response validation."""

from forum.schemas.common import ErrorDetail, ErrorResponse, MessageResponse
from forum.schemas.posts import (
    PostCreate,
    PostListResponse,
    PostOut,
    PostResponse,
    ReplyCreate,
    ReplyListResponse,
    ReplyOut,
    ReplyResponse,
    UploadResponse,
    VoteRequest,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    "PostCreate",
    "PostListResponse",
    "PostOut",
    "PostResponse",
    "ReplyCreate",
    "ReplyListResponse",
    "ReplyOut",
    "ReplyResponse",
    "UploadResponse",
    "VoteRequest",
]
