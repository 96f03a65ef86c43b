"""Reply model.

A reply belongs to exactly one post. The owning post's repliesCount
is bumped in the same transaction that inserts the reply.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from forum.models.post import utcnow
from forum.stores.database import Base


class Reply(Base):
    """Reply to a post."""

    __tablename__ = "replies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(ForeignKey("posts.id"), index=True)
    content: Mapped[str | None] = mapped_column(Text)

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Reply {self.id} post={self.post_id}>"
