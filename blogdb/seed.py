"""
Fill a database with fake users, posts and comments.

Rows go through the regular create operations, so foreign keys are checked
the same way as for real callers. Referenced ids are drawn from rows created
earlier in the same run.
"""

import hashlib
import time

from faker import Faker

from blogdb import queries
from blogdb.logger import get_logger

logger = get_logger(__name__)

NUM_USERS = 10
NUM_POSTS = 50
NUM_COMMENTS = 100


def _fake_password_hash(fake: Faker) -> str:
    return hashlib.sha256(fake.password().encode()).hexdigest()


def seed_users(conn, count, fake):
    logger.info(f"Seeding {count} users...")
    users = []
    for _ in range(count):
        users.append(
            queries.create_user(
                conn,
                fake.unique.user_name(),
                fake.unique.email(),
                _fake_password_hash(fake),
            )
        )
    return users


def seed_posts(conn, count, user_ids, fake):
    logger.info(f"Seeding {count} posts...")
    posts = []
    for _ in range(count):
        uid = fake.random_element(user_ids)
        posts.append(
            queries.create_post(conn, fake.sentence(), fake.text(), fake.boolean(), uid)
        )
    return posts


def seed_comments(conn, count, user_ids, post_ids, fake):
    logger.info(f"Seeding {count} comments...")
    comments = []
    for _ in range(count):
        uid = fake.random_element(user_ids)
        pid = fake.random_element(post_ids)
        comments.append(queries.create_comment(conn, uid, pid, fake.text()))
    return comments


def seed(conn, users=NUM_USERS, posts=NUM_POSTS, comments=NUM_COMMENTS, fake=None):
    """
    Create `users` users, then `posts` posts and `comments` comments by them.

    Returns:
        Tuple of (users, posts, comments) lists of created models.
    """
    if fake is None:
        fake = Faker()
    if (posts or comments) and not users:
        raise ValueError("Posts and comments need at least one user.")
    if comments and not posts:
        raise ValueError("Comments need at least one post.")

    start_time = time.time()

    created_users = seed_users(conn, users, fake)
    user_ids = [u.user_id for u in created_users]
    created_posts = seed_posts(conn, posts, user_ids, fake)
    post_ids = [p.post_id for p in created_posts]
    created_comments = seed_comments(conn, comments, user_ids, post_ids, fake)

    logger.info(f"Total Seeding Time: {time.time() - start_time:.2f} seconds")
    return created_users, created_posts, created_comments
