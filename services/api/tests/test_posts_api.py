"""Tests for the post and vote endpoints."""

import asyncio
from datetime import datetime

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, **body) -> dict:
    response = await client.post("/api/posts", json=body)
    assert response.status_code == 200
    payload = response.json()
    assert payload["message"] == "success"
    return payload["data"]


async def _get(client: AsyncClient, post_id: int) -> dict:
    response = await client.get(f"/api/posts/{post_id}")
    assert response.status_code == 200
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_post_returns_id_and_zero_counters(client: AsyncClient):
    data = await _create(client, heading="Hello", content="World", hashtag="#test", imageUrl=None)

    assert data["id"] == 1
    assert data["heading"] == "Hello"
    assert data["content"] == "World"
    assert data["hashtag"] == "#test"
    assert data["imageUrl"] is None
    assert data["upvotes"] == 0
    assert data["downvotes"] == 0
    assert data["repliesCount"] == 0
    assert data["timestamp"]


@pytest.mark.asyncio
async def test_create_post_stores_missing_fields_as_null(client: AsyncClient):
    data = await _create(client, content="only content")

    assert data["heading"] is None
    assert data["hashtag"] is None
    assert data["imageUrl"] is None
    assert data["content"] == "only content"


@pytest.mark.asyncio
async def test_create_post_rejects_non_string_fields(client: AsyncClient):
    response = await client.post("/api/posts", json={"heading": {"nested": True}})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    listing = await client.get("/api/posts")
    assert listing.json()["data"] == []


@pytest.mark.asyncio
async def test_list_posts_newest_first(client: AsyncClient):
    for i in range(5):
        await _create(client, heading=f"post {i}", content="c", hashtag="#h")

    response = await client.get("/api/posts")
    assert response.status_code == 200
    payload = response.json()
    assert payload["message"] == "success"

    posts = payload["data"]
    assert len(posts) == 5
    assert [p["id"] for p in posts] == [5, 4, 3, 2, 1]
    timestamps = [datetime.fromisoformat(p["timestamp"].replace("Z", "+00:00")) for p in posts]
    assert timestamps == sorted(timestamps, reverse=True)


@pytest.mark.asyncio
async def test_list_posts_empty(client: AsyncClient):
    response = await client.get("/api/posts")
    assert response.status_code == 200
    assert response.json() == {"message": "success", "data": []}


@pytest.mark.asyncio
async def test_votes_increment_counters(client: AsyncClient):
    post = await _create(client, heading="h", content="c", hashtag="#h")

    for vote_type in ("upvote", "upvote", "downvote"):
        response = await client.post(f"/api/posts/{post['id']}/vote", json={"voteType": vote_type})
        assert response.status_code == 200
        assert response.json() == {"message": "success"}

    stored = await _get(client, post["id"])
    assert stored["upvotes"] == 2
    assert stored["downvotes"] == 1


@pytest.mark.asyncio
async def test_concurrent_votes_are_not_lost(client: AsyncClient):
    post = await _create(client, heading="h", content="c", hashtag="#h")
    url = f"/api/posts/{post['id']}/vote"

    votes = ["upvote"] * 12 + ["downvote"] * 7
    responses = await asyncio.gather(*(client.post(url, json={"voteType": v}) for v in votes))
    assert all(r.status_code == 200 for r in responses)

    stored = await _get(client, post["id"])
    assert stored["upvotes"] == 12
    assert stored["downvotes"] == 7


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"voteType": "sideways"}, {"voteType": "UPVOTE"}, {}])
async def test_invalid_vote_type_mutates_nothing(client: AsyncClient, body: dict):
    post = await _create(client, heading="h", content="c", hashtag="#h")

    response = await client.post(f"/api/posts/{post['id']}/vote", json=body)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_VOTE_TYPE"
    assert error["message"] == "Invalid vote type"

    stored = await _get(client, post["id"])
    assert stored["upvotes"] == 0
    assert stored["downvotes"] == 0


@pytest.mark.asyncio
async def test_vote_on_unknown_post_is_404(client: AsyncClient):
    response = await client.post("/api/posts/999/vote", json={"voteType": "upvote"})
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "POST_NOT_FOUND"
    assert error["detail"] == {"post_id": 999}


@pytest.mark.asyncio
async def test_get_unknown_post_is_404(client: AsyncClient):
    response = await client.get("/api/posts/42")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_non_integer_post_id_is_400(client: AsyncClient):
    response = await client.post("/api/posts/abc/vote", json={"voteType": "upvote"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_forum_scenario(client: AsyncClient):
    """Create, vote, reply, then read everything back."""
    post = await _create(client, heading="Hello", content="World", hashtag="#test", imageUrl=None)
    assert post["id"] == 1

    await client.post("/api/posts/1/vote", json={"voteType": "upvote"})
    await client.post("/api/posts/1/vote", json={"voteType": "upvote"})
    await client.post("/api/posts/1/vote", json={"voteType": "downvote"})

    posts = (await client.get("/api/posts")).json()["data"]
    assert posts[0]["id"] == 1
    assert posts[0]["upvotes"] == 2
    assert posts[0]["downvotes"] == 1

    reply = await client.post("/api/posts/1/replies", json={"content": "nice"})
    assert reply.status_code == 200

    replies = (await client.get("/api/posts/1/replies")).json()["data"]
    assert len(replies) == 1
    assert replies[0]["content"] == "nice"

    posts = (await client.get("/api/posts")).json()["data"]
    assert posts[0]["repliesCount"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,path,body",
    [
        ("get", "/api/posts/{id}", None),
        ("get", "/api/posts/{id}/replies", None),
        ("post", "/api/posts/{id}/vote", {"voteType": "upvote"}),
        ("post", "/api/posts/{id}/replies", {"content": "hi"}),
    ],
)
@pytest.mark.parametrize("post_id", [2**63, 0, -1])
async def test_out_of_range_post_id_is_400(client: AsyncClient, method: str, path: str, body, post_id: int):
    url = path.format(id=post_id)
    if method == "get":
        response = await client.get(url)
    else:
        response = await client.post(url, json=body)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_largest_post_id_is_accepted(client: AsyncClient):
    response = await client.get(f"/api/posts/{2**63 - 1}/replies")
    assert response.status_code == 200
    assert response.json()["data"] == []
