"""Post, vote and reply endpoints.

GET  /api/posts                  - all posts, newest first
POST /api/posts                  - create a post
GET  /api/posts/{id}             - a single post
POST /api/posts/{id}/vote        - upvote or downvote
GET  /api/posts/{id}/replies     - replies, oldest first
POST /api/posts/{id}/replies     - add a reply (bumps repliesCount)

Routers are thin: call services for business logic. Service errors are
rendered by the ForumError handler in forum.main.
"""

from fastapi import APIRouter, Path

from forum.schemas import (
    ErrorResponse,
    MessageResponse,
    PostCreate,
    PostListResponse,
    PostResponse,
    ReplyCreate,
    ReplyListResponse,
    ReplyResponse,
    VoteRequest,
)
from forum.services.posts import create_post, get_post, list_posts, vote_post
from forum.services.replies import create_reply, list_replies

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)

# Largest id a 64-bit INTEGER column can hold
MAX_POST_ID = 2**63 - 1

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Post not found"}}


@router.get("", response_model=PostListResponse)
async def get_posts() -> PostListResponse:
    """List every post, newest first."""
    return PostListResponse(data=await list_posts())


@router.post("", response_model=PostResponse)
async def add_post(body: PostCreate) -> PostResponse:
    """Create a post. Counters start at zero."""
    return PostResponse(data=await create_post(body))


@router.get("/{post_id}", response_model=PostResponse, responses=NOT_FOUND)
async def get_single_post(
    post_id: int = Path(description="Post ID", ge=1, le=MAX_POST_ID),
) -> PostResponse:
    return PostResponse(data=await get_post(post_id))


@router.post("/{post_id}/vote", response_model=MessageResponse, responses=NOT_FOUND)
async def vote(
    body: VoteRequest,
    post_id: int = Path(description="Post ID to vote on", ge=1, le=MAX_POST_ID),
) -> MessageResponse:
    """Record an upvote or downvote.

    Raises:
        400 INVALID_VOTE_TYPE: voteType is not "upvote" or "downvote".
        404 POST_NOT_FOUND: No such post.
    """
    await vote_post(post_id, body.vote_type)
    return MessageResponse()


@router.get("/{post_id}/replies", response_model=ReplyListResponse)
async def get_replies(
    post_id: int = Path(description="Post ID", ge=1, le=MAX_POST_ID),
) -> ReplyListResponse:
    """List replies for a post, oldest first."""
    return ReplyListResponse(data=await list_replies(post_id))


@router.post("/{post_id}/replies", response_model=ReplyResponse, responses=NOT_FOUND)
async def add_reply(
    body: ReplyCreate,
    post_id: int = Path(description="Post ID to reply to", ge=1, le=MAX_POST_ID),
) -> ReplyResponse:
    """Add a reply and bump the post's repliesCount in one transaction."""
    return ReplyResponse(data=await create_reply(post_id, body.content))
