"""
Data Models

Records returned by the Blog API and the payload structs sent to it.
Attributes are snake_case; the wire format uses camelCase.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .http.client import RequestError


def _malformed(kind: str, data: Any, error: Exception) -> RequestError:
    return RequestError(f"Malformed {kind} payload ({error!r}): {data!r}")


def expect_list(record_type, data: Any) -> list:
    """Check that a payload is a JSON array of `record_type` records."""
    if not isinstance(data, list):
        raise RequestError(
            f"Expected a list of {record_type.__name__} records, got {type(data).__name__}"
        )
    return data


def decode_list(record_type, data: Any) -> list:
    """Decode a JSON array into a list of `record_type` records."""
    return [record_type.from_dict(item) for item in expect_list(record_type, data)]


def _drop_none(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass
class Post:
    """Represents a post from the API."""
    id: int
    user_id: int
    title: str
    body: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        """Build a post from its wire JSON."""
        try:
            return cls(
                id=data["id"],
                user_id=data["userId"],
                title=data["title"],
                body=data["body"],
            )
        except (KeyError, TypeError) as e:
            raise _malformed("post", data, e) from e

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire JSON for this record."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "body": self.body,
        }


@dataclass
class Comment:
    """Represents a comment on a post."""
    id: int
    post_id: int
    name: str
    email: str
    body: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        """Build a comment from its wire JSON."""
        try:
            return cls(
                id=data["id"],
                post_id=data["postId"],
                name=data["name"],
                email=data["email"],
                body=data["body"],
            )
        except (KeyError, TypeError) as e:
            raise _malformed("comment", data, e) from e

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire JSON for this record."""
        return {
            "id": self.id,
            "postId": self.post_id,
            "name": self.name,
            "email": self.email,
            "body": self.body,
        }


@dataclass
class User:
    """
    Represents a user account.

    The API returns more fields (address, company); only the ones
    below are kept.
    """
    id: int
    name: str
    email: str
    username: str
    phone: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Build a user from its wire JSON, ignoring unknown fields."""
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                email=data["email"],
                username=data["username"],
                phone=data.get("phone"),
                website=data.get("website"),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise _malformed("user", data, e) from e

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire JSON for this record."""
        return _drop_none({
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "phone": self.phone,
            "website": self.website,
        })


@dataclass
class PostUpdate:
    """Fields to change on a post. None means leave unchanged."""
    user_id: Optional[int] = None
    title: Optional[str] = None
    body: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the request body, leaving out unset fields."""
        return _drop_none({
            "userId": self.user_id,
            "title": self.title,
            "body": self.body,
        })


@dataclass
class CommentUpdate:
    """Fields to change on a comment. None means leave unchanged."""
    post_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the request body, leaving out unset fields."""
        return _drop_none({
            "postId": self.post_id,
            "name": self.name,
            "email": self.email,
            "body": self.body,
        })


@dataclass
class NewUser:
    """Payload for creating a user."""
    name: str
    email: str
    username: str
    phone: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the request body, leaving out unset fields."""
        return _drop_none({
            "name": self.name,
            "email": self.email,
            "username": self.username,
            "phone": self.phone,
            "website": self.website,
        })
