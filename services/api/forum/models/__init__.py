"""SQLAlchemy ORM models.

Models represent database tables:
- posts: Forum posts with vote and reply counters
- replies: Replies attached to a post
"""

from forum.models.post import Post
from forum.models.reply import Reply

__all__ = ["Post", "Reply"]
