"""
Fuzzy Token Matcher - token normalization, trigram fingerprints and similarity scoring.

This package turns free text into comparable tokens, derives character-trigram
fingerprints from them and scores approximate similarity between strings. On top
of those pure functions it offers an in-memory trigram index and a document search
engine with exact, fuzzy and related-document lookups plus tag autocomplete.
"""

__version__ = "1.0.0"

from .core import (
    FuzzyMatcher,
    SearchEngine,
    TrigramIndex,
    calculate_similarity,
    generate_all_trigrams,
    generate_trigrams,
    normalize,
    process_search_query,
    remove_duplicates,
    tag_similarity,
    text_similarity,
    token_set_similarity,
    tokenize,
)
from .log_config import configure_logging
from .models import DEFAULT_CONFIG, Document, ScoredDocument, SearchResponse, TokenizerConfig

__all__ = [
    "DEFAULT_CONFIG",
    "Document",
    "FuzzyMatcher",
    "ScoredDocument",
    "SearchEngine",
    "SearchResponse",
    "TokenizerConfig",
    "TrigramIndex",
    "calculate_similarity",
    "configure_logging",
    "generate_all_trigrams",
    "generate_trigrams",
    "normalize",
    "process_search_query",
    "remove_duplicates",
    "tag_similarity",
    "text_similarity",
    "token_set_similarity",
    "tokenize",
]
