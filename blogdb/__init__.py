"""
blogdb - data access for users, posts and comments.
"""

from blogdb.models import Comment, NewComment, NewPost, NewUser, Post, User
from blogdb.queries import (
    create_comment,
    create_post,
    create_user,
    delete_comment,
    delete_post,
    delete_user,
)
from blogdb.schema import create_schema, drop_schema, metadata

__all__ = [
    "Comment",
    "NewComment",
    "NewPost",
    "NewUser",
    "Post",
    "User",
    "create_comment",
    "create_post",
    "create_schema",
    "create_user",
    "delete_comment",
    "delete_post",
    "delete_user",
    "drop_schema",
    "metadata",
]
