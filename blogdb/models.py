"""
Domain models for the blog store.

Read-models (`User`, `Post`, `Comment`) are immutable snapshots of a fetched
row. Insert-models (`NewUser`, `NewPost`, `NewComment`) carry only the fields
a caller supplies on creation; primary keys are assigned by the database.
"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class User:
    """
    A row of the users table.

    Attributes:
        user_id: Database primary key.
        name: Display name.
        email: Email address.
        password_hash: Stored password hash.
    """
    user_id: int
    name: str
    email: str
    password_hash: str

    @property
    def id(self) -> int:
        return self.user_id

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(
            user_id=row["user_id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
        )

    def __str__(self) -> str:
        return f"#{self.user_id} {self.name} <{self.email}>"


@dataclass(frozen=True)
class Post:
    """
    A row of the posts table.

    Attributes:
        post_id: Database primary key.
        title: Post title (at most 255 characters).
        post_body: Post body text.
        published: Whether the post is visible.
        user_id: Author, references users.user_id.
    """
    post_id: int
    title: str
    post_body: str
    published: bool
    user_id: int

    @property
    def id(self) -> int:
        return self.post_id

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Post":
        return cls(
            post_id=row["post_id"],
            title=row["title"],
            post_body=row["post_body"],
            published=bool(row["published"]),
            user_id=row["user_id"],
        )

    def __str__(self) -> str:
        status = "published" if self.published else "draft"
        return f"#{self.post_id} {self.title} ({status}) by user {self.user_id}"


@dataclass(frozen=True)
class Comment:
    """A row of the comments table."""
    comment_id: int
    post_id: int
    user_id: int
    comment_body: str

    @property
    def id(self) -> int:
        return self.comment_id

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Comment":
        return cls(
            comment_id=row["comment_id"],
            post_id=row["post_id"],
            user_id=row["user_id"],
            comment_body=row["comment_body"],
        )


# Insert-models. Built fresh for every create call.


@dataclass
class NewUser:
    name: str
    email: str
    password_hash: str

    def values(self) -> dict:
        return asdict(self)


@dataclass
class NewPost:
    title: str
    post_body: str
    user_id: int
    published: bool = False

    def values(self) -> dict:
        return asdict(self)


@dataclass
class NewComment:
    user_id: int
    post_id: int
    comment_body: str

    def values(self) -> dict:
        return asdict(self)
