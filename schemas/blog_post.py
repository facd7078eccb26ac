"""
Blog Post Validation Schema

Pydantic model for validating the create/edit post form.
Only presence is checked; URLs and categories are taken as given.
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional

from models import BlogPostFields


class BlogPostSchema(BaseModel):
    """
    Validation schema for a submitted blog post form.

    Title and summary are required. Blank optional fields become None so the
    store records them as unset.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        description="Post title"
    )
    summary: str = Field(
        ...,
        min_length=1,
        description="Short description shown in listings"
    )
    content: Optional[str] = Field(
        default=None,
        description="Full post body"
    )
    image_url: Optional[str] = Field(
        default=None,
        description="Cover image address"
    )
    category: Optional[str] = Field(
        default=None,
        description="Category name"
    )

    @field_validator('title', 'summary', mode='before')
    @classmethod
    def require_text(cls, v):
        """Reject missing or whitespace-only values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("This field is required")
        return v

    @field_validator('content', 'image_url', 'category', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty form inputs as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_fields(self) -> BlogPostFields:
        """Convert to the field set the store accepts."""
        return BlogPostFields(
            title=self.title,
            summary=self.summary,
            content=self.content,
            image_url=self.image_url,
            category=self.category,
        )
