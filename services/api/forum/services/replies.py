"""Reply service: list and create replies.

Creating a reply bumps the owning post's repliesCount and inserts the
reply row in one transaction. Either both land or neither does, so
repliesCount always equals the number of stored replies.
"""

from datetime import datetime, timezone
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from forum.models import Post, Reply
from forum.schemas import ReplyOut
from forum.services.errors import PostNotFoundError, StorageError
from forum.services.posts import as_utc
from forum.stores.database import get_session

logger = logging.getLogger("uvicorn.error")


def reply_to_out(reply: Reply) -> ReplyOut:
    return ReplyOut(
        id=reply.id,
        post_id=reply.post_id,
        content=reply.content,
        timestamp=as_utc(reply.timestamp),
    )


async def list_replies(post_id: int) -> list[ReplyOut]:
    """Get replies for a post, oldest first.

    An unknown post id yields an empty list, not an error.

    Raises:
        StorageError: If the read fails.
    """
    try:
        async with get_session() as session:
            result = await session.execute(
                select(Reply)
                .where(Reply.post_id == post_id)
                .order_by(Reply.timestamp.asc(), Reply.id.asc())
            )
            return [reply_to_out(r) for r in result.scalars().all()]
    except SQLAlchemyError as e:
        logger.exception(f"Failed to list replies for post {post_id}")
        raise StorageError("Failed to retrieve replies") from e


async def create_reply(post_id: int, content: str | None) -> ReplyOut:
    """Add a reply to a post and bump its repliesCount atomically.

    The counter UPDATE doubles as the existence check: zero affected rows
    means the post does not exist and the transaction is rolled back.

    Raises:
        PostNotFoundError: If no post has this id.
        StorageError: If either write fails. Neither write is kept.
    """
    try:
        async with get_session() as session:
            result = await session.execute(
                update(Post)
                .where(Post.id == post_id)
                .values({Post.replies_count: Post.replies_count + 1})
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                logger.warning(f"Rejected reply: post {post_id} not found")
                raise PostNotFoundError(post_id)

            reply = Reply(
                post_id=post_id,
                content=content,
                timestamp=datetime.now(timezone.utc),
            )
            session.add(reply)
            await session.flush()
            created = reply_to_out(reply)
    except SQLAlchemyError as e:
        logger.exception(f"Failed to create reply for post {post_id}; rolled back")
        raise StorageError("Failed to create reply") from e

    logger.info(f"Created reply id={created.id} on post {post_id}")
    return created
