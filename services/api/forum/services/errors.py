"""Service-level errors.

Every error carries the HTTP status and machine-readable code it is
rendered with by the exception handler in forum.main.
"""

from typing import Any


class ForumError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidVoteTypeError(ForumError):
    status_code = 400
    code = "INVALID_VOTE_TYPE"

    def __init__(self, vote_type: object) -> None:
        super().__init__(
            "Invalid vote type",
            {"voteType": vote_type, "allowed": ["upvote", "downvote"]},
        )


class PostNotFoundError(ForumError):
    status_code = 404
    code = "POST_NOT_FOUND"

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found", {"post_id": post_id})
        self.post_id = post_id


class UploadTooLargeError(ForumError):
    status_code = 413
    code = "UPLOAD_TOO_LARGE"

    def __init__(self, limit: int) -> None:
        super().__init__(f"Upload exceeds {limit} bytes", {"max_bytes": limit})


class StorageError(ForumError):
    """A read or write against the database or disk failed."""

    status_code = 500
    code = "STORAGE_ERROR"
