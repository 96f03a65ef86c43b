"""Post service: create, list and vote on posts.

Vote counters are bumped with a single UPDATE ... SET col = col + 1,
so concurrent votes never lose an increment. A vote on an unknown post
is detected from the affected row count of that same UPDATE.
"""

from datetime import datetime, timezone
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from forum.models import Post
from forum.schemas import PostCreate, PostOut
from forum.services.errors import InvalidVoteTypeError, PostNotFoundError, StorageError
from forum.stores.database import get_session

logger = logging.getLogger("uvicorn.error")

# voteType -> counter column
VOTE_COLUMNS = {
    "upvote": Post.upvotes,
    "downvote": Post.downvotes,
}


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def post_to_out(post: Post) -> PostOut:
    return PostOut(
        id=post.id,
        heading=post.heading,
        content=post.content,
        hashtag=post.hashtag,
        image_url=post.image_url,
        upvotes=post.upvotes,
        downvotes=post.downvotes,
        replies_count=post.replies_count,
        timestamp=as_utc(post.timestamp),
    )


async def list_posts() -> list[PostOut]:
    """Get all posts, newest first.

    Returns:
        Every post, ordered by timestamp DESC then id DESC.

    Raises:
        StorageError: If the read fails.
    """
    try:
        async with get_session() as session:
            result = await session.execute(
                select(Post).order_by(Post.timestamp.desc(), Post.id.desc())
            )
            return [post_to_out(p) for p in result.scalars().all()]
    except SQLAlchemyError as e:
        logger.exception("Failed to list posts")
        raise StorageError("Failed to retrieve posts") from e


async def get_post(post_id: int) -> PostOut:
    """Get a single post by id."""
    try:
        async with get_session() as session:
            post = await session.get(Post, post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            return post_to_out(post)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to load post {post_id}")
        raise StorageError("Failed to retrieve post") from e


async def create_post(data: PostCreate) -> PostOut:
    """Insert a new post with all counters at zero.

    Fields are stored exactly as given; missing ones are stored as NULL.

    Raises:
        StorageError: If the insert fails.
    """
    try:
        async with get_session() as session:
            post = Post(
                heading=data.heading,
                content=data.content,
                hashtag=data.hashtag,
                image_url=data.image_url,
                upvotes=0,
                downvotes=0,
                replies_count=0,
                timestamp=datetime.now(timezone.utc),
            )
            session.add(post)
            await session.flush()
            created = post_to_out(post)
    except SQLAlchemyError as e:
        logger.exception("Failed to create post")
        raise StorageError("Failed to create post") from e

    logger.info(f"Created post id={created.id}")
    return created


async def vote_post(post_id: int, vote_type: str | None) -> None:
    """Increment the upvote or downvote counter of a post.

    Args:
        post_id: Post to vote on.
        vote_type: "upvote" or "downvote".

    Raises:
        InvalidVoteTypeError: If vote_type is anything else. Nothing is written.
        PostNotFoundError: If no post has this id.
        StorageError: If the update fails.
    """
    column = VOTE_COLUMNS.get(vote_type) if isinstance(vote_type, str) else None
    if column is None:
        logger.warning(f"Rejected vote on post {post_id}: invalid voteType={vote_type!r}")
        raise InvalidVoteTypeError(vote_type)

    try:
        async with get_session() as session:
            result = await session.execute(
                update(Post)
                .where(Post.id == post_id)
                .values({column: column + 1})
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise PostNotFoundError(post_id)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to record {vote_type} on post {post_id}")
        raise StorageError("Failed to record vote") from e

    logger.info(f"Recorded {vote_type} on post {post_id}")
