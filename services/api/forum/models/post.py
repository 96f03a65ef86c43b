"""Post model.

A post carries free-form text, an optional image URL and three counters.
Counters are only ever incremented in place (col = col + 1).
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from forum.stores.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Forum post."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Content (stored as given, no validation)
    heading: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    hashtag: Mapped[str | None] = mapped_column(Text)
    image_url: Mapped[str | None] = mapped_column("imageUrl", Text)

    # Counters
    upvotes: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    downvotes: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    replies_count: Mapped[int] = mapped_column(
        "repliesCount", Integer, default=0, server_default="0"
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Post {self.id} +{self.upvotes}/-{self.downvotes} replies={self.replies_count}>"
