"""
Validation Schemas Package

Contains Pydantic models for input validation and data sanitization.
"""

from .blog_post import BlogPostSchema

__all__ = ['BlogPostSchema']
