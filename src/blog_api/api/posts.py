"""
Posts API

Async accessors for the /posts resource.
"""

import logging
from typing import List, Optional

from ..http import HttpClient, get_client, logs_request_errors
from ..models import Post, PostUpdate, decode_list


logger = logging.getLogger(__name__)


@logs_request_errors("Error fetching posts")
async def get_posts(*, client: Optional[HttpClient] = None) -> List[Post]:
    """Fetch every post."""
    response = await (client or get_client()).get("/posts")
    return decode_list(Post, response.data)


@logs_request_errors("Error fetching user posts")
async def get_posts_by_user_id(
    user_id: int,
    *,
    client: Optional[HttpClient] = None,
) -> List[Post]:
    """
    Fetch the posts owned by a user.

    Args:
        user_id: Owner of the posts.

    Returns:
        Posts filtered server-side; empty if the user has none.
    """
    response = await (client or get_client()).get("/posts", params={"userId": user_id})
    return decode_list(Post, response.data)


@logs_request_errors("Error creating post")
async def create_post(
    user_id: int,
    title: str,
    body: str,
    *,
    client: Optional[HttpClient] = None,
) -> Post:
    """
    Create a post.

    Returns:
        The stored post, including its server-assigned id.
    """
    response = await (client or get_client()).post(
        "/posts",
        json={"userId": user_id, "title": title, "body": body},
    )
    return Post.from_dict(response.data)


@logs_request_errors("Error updating post")
async def update_post(
    post_id: int,
    changes: PostUpdate,
    *,
    client: Optional[HttpClient] = None,
) -> Post:
    """
    Partially update a post.

    Only the fields set on `changes` are sent.

    Returns:
        The full post as stored after the update.
    """
    response = await (client or get_client()).patch(f"/posts/{post_id}", json=changes.to_dict())
    return Post.from_dict(response.data)


@logs_request_errors("Error deleting post")
async def delete_post(post_id: int, *, client: Optional[HttpClient] = None) -> None:
    """Delete a post. Returns None on success."""
    await (client or get_client()).delete(f"/posts/{post_id}")
    logger.debug(f"Deleted post {post_id}")
