"""Data models for the fuzzy token matcher."""

from .document import Document
from .response import ScoredDocument, SearchResponse
from .tokenizer import DEFAULT_CONFIG, TokenizerConfig

__all__ = [
    "DEFAULT_CONFIG",
    "Document",
    "ScoredDocument",
    "SearchResponse",
    "TokenizerConfig",
]
