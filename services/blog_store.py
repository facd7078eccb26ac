"""
Blog Store - The in-memory collection of blog posts

Holds the ordered sequence of posts for the lifetime of one application
instance and provides create, read, update and delete access. Nothing is
persisted; a restart brings back the seed posts.

Ids are allocated as max(current ids) + 1, recomputed on every create. Deleting
the highest id therefore frees it for reuse by the next create.
"""

import logging
import threading
from typing import Iterable, List, Optional

from flask import current_app

from models import BlogPost, BlogPostFields

logger = logging.getLogger('blog_app')

STORE_EXTENSION_KEY = 'blog_store'

SEED_POSTS = [
    BlogPost(
        id=1,
        title="First Blog Post",
        summary="This is the summary of the first blog post.",
        content="This is the full content of the first blog post. You can add detailed information here.",
        image_url="https://images.unsplash.com/photo-1499750310107-5fef28a66643?w=500&h=300&fit=crop",
        category="Technology",
    ),
    BlogPost(
        id=2,
        title="Second Blog Post",
        summary="This is the summary of the second blog post.",
        content="This is the full content of the second blog post. You can add detailed information here.",
        image_url="https://images.unsplash.com/photo-1517694712202-14dd9538aa97?w=500&h=300&fit=crop",
        category="Technology",
    ),
    BlogPost(
        id=3,
        title="Third Blog Post",
        summary="This is the summary of the third blog post.",
        content="This is the full content of the third blog post. You can add detailed information here.",
        image_url="https://images.unsplash.com/photo-1460925895917-aeb19be489c7?w=500&h=300&fit=crop",
        category="Space",
    ),
]


class StoreNotInitializedError(RuntimeError):
    """Raised when the blog store is requested from an app that never created one."""


class BlogStore:
    """Ordered, in-memory store of blog posts, most recent first."""

    def __init__(self, seed: Optional[Iterable[BlogPost]] = None):
        """
        Initialize the store.

        Args:
            seed: Posts to start with, in display order. Defaults to the three
                  built-in seed posts; pass an empty list for an empty store.
        """
        if seed is None:
            seed = SEED_POSTS
        self._posts: List[BlogPost] = list(seed)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._posts)

    def __contains__(self, post_id: int) -> bool:
        return self.get_by_id(post_id) is not None

    def get_all(self) -> List[BlogPost]:
        """
        Return every post in display order.

        Returns:
            A new list; slicing or reordering it does not affect the store
        """
        with self._lock:
            return list(self._posts)

    def get_by_id(self, post_id: int) -> Optional[BlogPost]:
        """
        Find a post by id.

        Args:
            post_id: Id of the post

        Returns:
            The matching BlogPost, or None if there is none
        """
        with self._lock:
            return next((p for p in self._posts if p.id == post_id), None)

    def create(self, fields: BlogPostFields) -> BlogPost:
        """
        Add a new post at the front of the sequence.

        Args:
            fields: Title, summary and optional fields of the new post

        Returns:
            The created BlogPost with its assigned id
        """
        with self._lock:
            new_id = max((p.id for p in self._posts), default=0) + 1
            post = BlogPost.from_fields(new_id, fields)
            self._posts.insert(0, post)

        logger.info(f"Created blog post {new_id}: {fields.title!r}")
        return post

    def update(self, post_id: int, fields: BlogPostFields) -> None:
        """
        Replace every field except id of an existing post, keeping its position.

        Unknown ids are ignored.
        """
        with self._lock:
            for index, post in enumerate(self._posts):
                if post.id == post_id:
                    self._posts[index] = post.with_fields(fields)
                    break
            else:
                logger.debug(f"Update skipped, no blog post {post_id}")
                return

        logger.info(f"Updated blog post {post_id}")

    def delete(self, post_id: int) -> None:
        """Remove a post. Unknown ids are ignored."""
        with self._lock:
            remaining = [p for p in self._posts if p.id != post_id]
            removed = len(remaining) != len(self._posts)
            self._posts = remaining

        if removed:
            logger.info(f"Deleted blog post {post_id}")
        else:
            logger.debug(f"Delete skipped, no blog post {post_id}")


def init_blog_store(app, seed: Optional[Iterable[BlogPost]] = None) -> BlogStore:
    """
    Create the store for an application instance.

    Args:
        app: Flask application instance
        seed: Optional initial posts (see BlogStore)

    Returns:
        The new BlogStore, also registered in app.extensions
    """
    store = BlogStore(seed)
    app.extensions[STORE_EXTENSION_KEY] = store
    app.logger.info(f"Blog store initialized with {len(store)} posts")
    return store


def get_blog_store(app=None) -> BlogStore:
    """
    Return the store owned by the given (or current) application.

    Raises:
        StoreNotInitializedError: If init_blog_store was never called for the app
    """
    app = app or current_app
    store = app.extensions.get(STORE_EXTENSION_KEY)
    if store is None:
        raise StoreNotInitializedError(
            "Blog store is not initialized. Call init_blog_store(app) in create_app()."
        )
    return store
