"""
Services Package - Business Logic Layer

This package contains the blog store and the service classes that keep
route handlers thin and focused on HTTP concerns.
"""

from .blog_service import BlogService
from .blog_store import BlogStore, StoreNotInitializedError, get_blog_store, init_blog_store

__all__ = ['BlogService', 'BlogStore', 'StoreNotInitializedError', 'get_blog_store', 'init_blog_store']
