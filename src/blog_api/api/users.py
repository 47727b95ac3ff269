"""
Users API

Async accessors for the /users resource. Users can be listed, looked
up by e-mail and created; there is no update or delete.
"""

import logging
from typing import List, Optional

from ..http import HttpClient, get_client, logs_request_errors
from ..models import NewUser, User, decode_list, expect_list


logger = logging.getLogger(__name__)


@logs_request_errors("Error fetching users")
async def get_users(*, client: Optional[HttpClient] = None) -> List[User]:
    """Fetch every user."""
    response = await (client or get_client()).get("/users")
    return decode_list(User, response.data)


@logs_request_errors("Error fetching user by email")
async def get_user_by_email(
    email: str,
    *,
    client: Optional[HttpClient] = None,
) -> Optional[User]:
    """
    Look up a user by exact e-mail address.

    Args:
        email: Address to match server-side.

    Returns:
        The first matching user, or None if nobody matches.
        Additional matches are ignored.
    """
    response = await (client or get_client()).get("/users", params={"email": email})
    matches = expect_list(User, response.data)
    if not matches:
        logger.info(f"No user found with email {email}")
        return None
    # Only the first match is decoded; the rest are never inspected
    return User.from_dict(matches[0])


@logs_request_errors("Error creating user")
async def create_user(user: NewUser, *, client: Optional[HttpClient] = None) -> User:
    """
    Create a user.

    Returns:
        The stored user, including its server-assigned id.
    """
    response = await (client or get_client()).post("/users", json=user.to_dict())
    return User.from_dict(response.data)
