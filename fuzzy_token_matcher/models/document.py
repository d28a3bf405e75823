"""Document records indexed by the search engine."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Document(BaseModel):
    """A searchable record: a title, a body and its tag names."""
    
    doc_id: str = Field(..., min_length=1, description="Unique document identifier")
    title: str = Field(default="", description="Document title")
    content: str = Field(default="", description="Document body text")
    tags: List[str] = Field(default_factory=list, description="Tag names")
    subject: Optional[str] = Field(None, description="Subject the document belongs to")

    @field_validator("doc_id")
    @classmethod
    def validate_doc_id(cls, v: str) -> str:
        """Validate and normalize the identifier."""
        if not v.strip():
            raise ValueError("doc_id cannot be blank")
        return v.strip()

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        """Drop blank tag names."""
        return [tag.strip() for tag in v if tag and tag.strip()]

    def indexable_text(self) -> str:
        """Text whose match keys point at this document in the index."""
        return " ".join([self.title, self.content, *self.tags])
