"""
Models package for the blog app.

Provides the blog post data model.
"""
from .blog_post import BlogPost, BlogPostFields

__all__ = [
    'BlogPost',
    'BlogPostFields',
]
