#!/usr/bin/env python3
"""Seed database with demo posts, votes and replies.

Creates:
- A few posts with hashtags (no images)
- Some up/down votes on them
- A short reply thread on the first post

Everything goes through the post/reply services, so counters stay
consistent with the rows that exist.

Usage:
    cd services/api
    python -m scripts.seed
"""

import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from forum.schemas import PostCreate  # noqa: E402
from forum.services.posts import create_post, list_posts, vote_post  # noqa: E402
from forum.services.replies import create_reply  # noqa: E402
from forum.stores.database import close_db, create_tables, init_db  # noqa: E402

# ============================================================
# Demo content
# ============================================================

POSTS = [
    {
        "heading": "Welcome to the forum",
        "content": "Say hi and tell us what you are working on.",
        "hashtag": "#welcome",
        "upvotes": 5,
        "downvotes": 0,
        "replies": ["Hi everyone!", "Working on a sourdough starter.", "Glad to be here."],
    },
    {
        "heading": "Best budget mechanical keyboard?",
        "content": "Looking for something under $60 with hot-swap switches.",
        "hashtag": "#hardware",
        "upvotes": 3,
        "downvotes": 1,
        "replies": ["Check the Keychron C-series."],
    },
    {
        "heading": "Weekend hike photos",
        "content": "Upload coming soon, the trail was muddy but worth it.",
        "hashtag": "#outdoors",
        "upvotes": 2,
        "downvotes": 0,
        "replies": [],
    },
]


async def seed_database() -> None:
    """Insert demo content. Skips seeding if posts already exist."""
    await init_db()
    try:
        await create_tables()

        existing = await list_posts()
        if existing:
            print(f"Database already has {len(existing)} posts, skipping seed")
            return

        for post_def in POSTS:
            post = await create_post(
                PostCreate(
                    heading=post_def["heading"],
                    content=post_def["content"],
                    hashtag=post_def["hashtag"],
                )
            )
            for _ in range(post_def["upvotes"]):
                await vote_post(post.id, "upvote")
            for _ in range(post_def["downvotes"]):
                await vote_post(post.id, "downvote")
            for text in post_def["replies"]:
                await create_reply(post.id, text)
            print(f"  created post {post.id}: {post_def['heading']} ({len(post_def['replies'])} replies)")

        print(f"Seeded {len(POSTS)} posts")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(seed_database())
