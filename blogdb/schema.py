"""
Table definitions for the blog store.

Column names, types and foreign key directions match databases created by the
`create_users` migration, so existing stores can be used as-is.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    false,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("user_id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    sqlite_autoincrement=True,
)

posts = Table(
    "posts",
    metadata,
    Column("post_id", Integer, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("post_body", Text, nullable=False),
    Column("published", Boolean, nullable=False, server_default=false()),
    Column("user_id", Integer, ForeignKey("users.user_id"), nullable=False),
    sqlite_autoincrement=True,
)

comments = Table(
    "comments",
    metadata,
    Column("comment_id", Integer, primary_key=True),
    Column("post_id", Integer, ForeignKey("posts.post_id"), nullable=False),
    Column("user_id", Integer, ForeignKey("users.user_id"), nullable=False),
    Column("comment_body", Text, nullable=False),
    sqlite_autoincrement=True,
)


def create_schema(bind) -> None:
    metadata.create_all(bind)


def drop_schema(bind) -> None:
    metadata.drop_all(bind)
