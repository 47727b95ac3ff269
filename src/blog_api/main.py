"""
Main Entry Point

Small console front end for the Blog API client:

1. Look up a user by e-mail
2. Fetch the user's posts
3. Fetch the comments on each post concurrently
4. Report a summary

Usage:
    python -m blog_api [email]
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from .config import config
from .api import comments, posts, users
from .http import HttpClient, RequestError
from .models import Post, User


DEFAULT_EMAIL = "Sincere@april.biz"


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("blog_api")
    logger.setLevel(logging.DEBUG)

    # Replace handlers left by an earlier call
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


@dataclass
class PostSummary:
    """A post with the number of comments it has."""
    post: Post
    comment_count: int


@dataclass
class UserSummary:
    """A user and the posts they own."""
    user: User
    posts: List[PostSummary]

    @property
    def total_comments(self) -> int:
        return sum(p.comment_count for p in self.posts)


async def summarize_user(
    email: str,
    client: Optional[HttpClient] = None,
) -> Optional[UserSummary]:
    """
    Build a summary of a user's posts and comment counts.

    Args:
        email: E-mail address of the user.
        client: HTTP client to use (shared client if None).

    Returns:
        UserSummary, or None if no user has that e-mail.

    Raises:
        RequestError: If any request fails.
    """
    user = await users.get_user_by_email(email, client=client)
    if user is None:
        return None

    user_posts = await posts.get_posts_by_user_id(user.id, client=client)
    post_comments = await asyncio.gather(*(
        comments.get_comments_by_post_id(post.id, client=client)
        for post in user_posts
    ))

    return UserSummary(
        user=user,
        posts=[
            PostSummary(post=post, comment_count=len(found))
            for post, found in zip(user_posts, post_comments)
        ],
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the Blog API console."""
    args = sys.argv[1:] if argv is None else argv
    email = args[0] if args else DEFAULT_EMAIL

    logger = setup_logging(config.log.log_level)

    try:
        summary = asyncio.run(summarize_user(email))

        if summary is None:
            logger.error(f"No user with email {email}")
            sys.exit(1)

        logger.info("=" * 60)
        logger.info(f"{summary.user.name} (@{summary.user.username})")
        for item in summary.posts:
            logger.info(f"  [{item.post.id}] {item.post.title} ({item.comment_count} comments)")
        logger.info(f"Posts: {len(summary.posts)}, comments: {summary.total_comments}")
        logger.info("=" * 60)
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except RequestError as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
