"""
Create and delete operations for users, posts and comments.

Every operation takes an open SQLAlchemy connection and is its own unit of
work: it commits the connection's transaction before returning, and rolls it
back before re-raising when a statement fails. Anything the caller executed
earlier on the same connection and left uncommitted is committed (or rolled
back) along with it, so callers that need their own transaction boundaries
should commit before calling in. Database errors
(sqlalchemy.exc.IntegrityError and friends) propagate unchanged.
"""

from sqlalchemy import Column, Connection, Table, delete, insert, select

from blogdb import models, schema
from blogdb.logger import get_logger

logger = get_logger(__name__)


def _insert_and_fetch(conn: Connection, table: Table, pk: Column, values: dict):
    """Insert one row and return it as a mapping, fetched by its generated key."""
    try:
        result = conn.execute(insert(table).values(**values))
        new_id = result.inserted_primary_key[0]
        row = conn.execute(select(table).where(pk == new_id)).mappings().one()
        conn.commit()
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to insert into {table.name}: {e}")
        raise
    logger.debug(f"Inserted {table.name} #{new_id}")
    return row


def _delete_by_id(conn: Connection, table: Table, pk: Column, row_id: int, label: str) -> int:
    try:
        affected_rows = conn.execute(delete(table).where(pk == row_id)).rowcount
        conn.commit()
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to delete {label} {row_id}: {e}")
        raise
    if affected_rows == 0:
        logger.warning(f"No {label} with id {row_id} found")
    return affected_rows


# ── USERS ─────────────────────────────────────────────────


def create_user(conn: Connection, name: str, email: str, password_hash: str) -> models.User:
    """
    Insert a new user and return the stored row.

    Args:
        conn: Open database connection.
        name: Display name.
        email: Email address.
        password_hash: Already-hashed password.

    Returns:
        The created User.
    """
    new_user = models.NewUser(name=name, email=email, password_hash=password_hash)
    row = _insert_and_fetch(conn, schema.users, schema.users.c.user_id, new_user.values())
    return models.User.from_row(row)


def delete_user(conn: Connection, user_id: int) -> int:
    """
    Delete the user with `user_id`.

    Returns:
        Number of deleted rows; 0 when no such user exists.
    """
    return _delete_by_id(conn, schema.users, schema.users.c.user_id, user_id, "user")


# ── POSTS ─────────────────────────────────────────────────


def create_post(
    conn: Connection, title: str, body: str, is_published: bool, user_id: int
) -> models.Post:
    """
    Insert a new post authored by `user_id` and return the stored row.

    The author is not looked up first; a missing user surfaces as an
    IntegrityError from the foreign key.
    """
    new_post = models.NewPost(
        title=title,
        post_body=body,
        published=is_published,
        user_id=user_id,
    )
    row = _insert_and_fetch(conn, schema.posts, schema.posts.c.post_id, new_post.values())
    return models.Post.from_row(row)


def delete_post(conn: Connection, post_id: int) -> int:
    return _delete_by_id(conn, schema.posts, schema.posts.c.post_id, post_id, "post")


# ── COMMENTS ──────────────────────────────────────────────


def create_comment(conn: Connection, user_id: int, post_id: int, body: str) -> models.Comment:
    """Insert a comment by `user_id` on `post_id` and return the stored row."""
    new_comment = models.NewComment(user_id=user_id, post_id=post_id, comment_body=body)
    row = _insert_and_fetch(
        conn, schema.comments, schema.comments.c.comment_id, new_comment.values()
    )
    return models.Comment.from_row(row)


def delete_comment(conn: Connection, id: int) -> int:
    return _delete_by_id(conn, schema.comments, schema.comments.c.comment_id, id, "comment")
