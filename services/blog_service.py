"""
Blog Service - Presentation helpers for blog posts

This service encapsulates post body parsing, reading time and excerpt
calculation, plus the category filtering and slicing used by the listing
pages. It never mutates the store.
"""

import re
from typing import List, Optional
from models import BlogPost


class BlogService:
    """Service for preparing blog posts for display."""

    def calculate_reading_time(self, text: Optional[str]) -> int:
        """
        Calculate estimated reading time based on word count.

        Args:
            text: Post content

        Returns:
            Estimated reading time in minutes (minimum 1)
        """
        words = len((text or "").split())
        return max(1, round(words / 200))

    def get_excerpt(self, text: str, sentence_count: int = 2) -> str:
        """
        Extract an excerpt from post text.

        Args:
            text: Full post content
            sentence_count: Number of sentences to include

        Returns:
            Excerpt string (max 200 characters)
        """
        sentences = re.split(r'(?<=[.!?])\s+', text.strip())
        excerpt = ' '.join(sentences[:sentence_count])
        return (excerpt[:197] + '...') if len(excerpt) > 200 else excerpt

    def parse_content(self, text: Optional[str]) -> List[dict]:
        """
        Parse post content into paragraph blocks.

        Args:
            text: Raw post text

        Returns:
            List of content blocks with type and content
        """
        if not text:
            return []

        return [
            {"type": "paragraph", "content": para}
            for para in (p.strip() for p in re.split(r'\n\s*\n', text))
            if para
        ]

    def filter_by_category(self, posts: List[BlogPost], category: Optional[str]) -> List[BlogPost]:
        """
        Keep only posts in the given category (case-insensitive).

        An empty or missing category returns the posts unchanged.
        """
        if not category:
            return posts

        wanted = category.strip().lower()
        return [p for p in posts if p.category and p.category.lower() == wanted]

    def get_home_posts(self, posts: List[BlogPost], limit: int) -> List[BlogPost]:
        """Return the first `limit` posts for the home page."""
        return posts[:max(0, limit)]
