"""API routes."""

from fastapi import APIRouter

from forum.routes import posts, uploads

api_router = APIRouter()

# Posts, votes and replies
api_router.include_router(posts.router, prefix="/api/posts", tags=["posts"])

# Image upload
api_router.include_router(uploads.router, prefix="/api", tags=["uploads"])
