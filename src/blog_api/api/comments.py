"""
Comments API

Async accessors for the /comments resource.
"""

import logging
from typing import List, Optional

from ..http import HttpClient, get_client, logs_request_errors
from ..models import Comment, CommentUpdate, decode_list


logger = logging.getLogger(__name__)


@logs_request_errors("Error fetching comments")
async def get_comments_by_post_id(
    post_id: int,
    *,
    client: Optional[HttpClient] = None,
) -> List[Comment]:
    """Fetch the comments on a post. Empty if there are none."""
    response = await (client or get_client()).get("/comments", params={"postId": post_id})
    return decode_list(Comment, response.data)


@logs_request_errors("Error creating comment")
async def create_comment(
    post_id: int,
    name: str,
    email: str,
    body: str,
    *,
    client: Optional[HttpClient] = None,
) -> Comment:
    """
    Create a comment on a post.

    Returns:
        The stored comment, including its server-assigned id.
    """
    response = await (client or get_client()).post(
        "/comments",
        json={"postId": post_id, "name": name, "email": email, "body": body},
    )
    return Comment.from_dict(response.data)


@logs_request_errors("Error updating comment")
async def update_comment(
    comment_id: int,
    changes: CommentUpdate,
    *,
    client: Optional[HttpClient] = None,
) -> Comment:
    """Partially update a comment and return the stored result."""
    response = await (client or get_client()).patch(
        f"/comments/{comment_id}",
        json=changes.to_dict(),
    )
    return Comment.from_dict(response.data)


@logs_request_errors("Error deleting comment")
async def delete_comment(comment_id: int, *, client: Optional[HttpClient] = None) -> None:
    """Delete a comment. Returns None on success."""
    await (client or get_client()).delete(f"/comments/{comment_id}")
    logger.debug(f"Deleted comment {comment_id}")
