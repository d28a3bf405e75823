"""Response models returned by the search engine."""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from .document import Document


class ScoredDocument(BaseModel):
    """Individual search result."""
    
    document: Document = Field(..., description="The matched document")
    score: float = Field(..., ge=0.0, le=1.0, description="Relevance score (0-1)")


class SearchResponse(BaseModel):
    """Response for search queries."""
    
    query: str = Field(..., description="Original search query")
    match_type: str = Field(..., description="exact, fuzzy, recent or none")
    total_results: int = Field(..., description="Number of results on this page")
    results: List[ScoredDocument] = Field(..., description="Search results")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    suggestions: Optional[List[str]] = Field(None, description="Alternative tag suggestions if no match")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Response timestamp"
    )

    @property
    def documents(self) -> List[Document]:
        """Matched documents in ranked order."""
        return [result.document for result in self.results]
