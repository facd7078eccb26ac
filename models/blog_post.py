"""
Blog post model.
"""
from dataclasses import dataclass, asdict, replace
from typing import Optional


@dataclass(frozen=True)
class BlogPostFields:
    """Everything about a post except its id, as supplied by create/edit."""
    title: str
    summary: str
    content: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class BlogPost:
    """Represents a single blog post held by the store. Immutable; edits go through the store."""
    id: int
    title: str
    summary: str
    content: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_fields(cls, post_id: int, fields: BlogPostFields) -> "BlogPost":
        """Build a post from a field set and an assigned id."""
        return cls(id=post_id, **asdict(fields))

    def with_fields(self, fields: BlogPostFields) -> "BlogPost":
        """Return a copy with every field except id replaced."""
        return replace(self, **asdict(fields))

    @property
    def fields(self) -> BlogPostFields:
        return BlogPostFields(
            title=self.title,
            summary=self.summary,
            content=self.content,
            image_url=self.image_url,
            category=self.category,
        )
