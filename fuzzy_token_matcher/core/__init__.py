"""Core text matching functionality."""

from .engine import SearchEngine
from .fuzzy_matcher import FuzzyMatcher
from .index import TrigramIndex
from .normalizer import normalize
from .query import process_search_query
from .similarity import calculate_similarity, tag_similarity, text_similarity, token_set_similarity
from .tokenizer import remove_duplicates, tokenize
from .trigrams import generate_all_trigrams, generate_trigrams

__all__ = [
    "SearchEngine",
    "FuzzyMatcher",
    "TrigramIndex",
    "normalize",
    "tokenize",
    "remove_duplicates",
    "generate_trigrams",
    "generate_all_trigrams",
    "process_search_query",
    "calculate_similarity",
    "token_set_similarity",
    "text_similarity",
    "tag_similarity",
]
