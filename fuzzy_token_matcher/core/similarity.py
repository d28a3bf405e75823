"""Trigram-overlap similarity between strings, token lists and tag sets."""

from typing import Iterable, List, Optional

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig
from .normalizer import normalize
from .tokenizer import tokenize
from .trigrams import generate_trigrams


def calculate_similarity(
    text1: Optional[str], 
    text2: Optional[str], 
    config: TokenizerConfig = DEFAULT_CONFIG
) -> float:
    """
    Calculate the trigram similarity of two strings.
    
    Both strings are normalized first; equal forms score 1.0. When either
    side is too short to have trigrams, the score is the length ratio if one
    form contains the other and 0.0 otherwise. Everything else gets the
    Jaccard coefficient of the two trigram sets.
    
    Args:
        text1: First text, may be None
        text2: Second text, may be None
        config: Tokenizer configuration
        
    Returns:
        Similarity score between 0 and 1
    """
    if text1 is None or text2 is None or not text1.strip() or not text2.strip():
        return 0.0
    
    norm1 = normalize(text1, config)
    norm2 = normalize(text2, config)
    
    if not norm1 or not norm2:
        return 0.0
    
    if norm1 == norm2:
        return 1.0
    
    set1 = set(generate_trigrams(norm1, config))
    set2 = set(generate_trigrams(norm2, config))
    
    if not set1 or not set2:
        if norm1 in norm2 or norm2 in norm1:
            return min(len(norm1), len(norm2)) / max(len(norm1), len(norm2))
        return 0.0
    
    return len(set1 & set2) / len(set1 | set2)


def token_set_similarity(
    query_tokens: List[str], 
    document_tokens: List[str], 
    config: TokenizerConfig = DEFAULT_CONFIG
) -> float:
    """
    Average, over the query tokens, of each token's best match in the document.
    
    Args:
        query_tokens: Tokens from the search query
        document_tokens: Tokens from the document text
        config: Tokenizer configuration
        
    Returns:
        Similarity score between 0 and 1
    """
    if not query_tokens or not document_tokens:
        return 0.0
    
    total = 0.0
    for query_token in query_tokens:
        total += max(
            calculate_similarity(query_token, document_token, config)
            for document_token in document_tokens
        )
    
    return total / len(query_tokens)


def text_similarity(
    query: Optional[str], 
    text: Optional[str], 
    config: TokenizerConfig = DEFAULT_CONFIG
) -> float:
    """Tokenize both texts and compare them with :func:`token_set_similarity`."""
    return token_set_similarity(tokenize(query, config), tokenize(text, config), config)


def tag_similarity(
    tags1: Optional[Iterable[str]], 
    tags2: Optional[Iterable[str]], 
    config: TokenizerConfig = DEFAULT_CONFIG
) -> float:
    """Jaccard similarity of two sets of tag names after normalization."""
    set1 = {normalize(tag, config) for tag in tags1 or ()} - {""}
    set2 = {normalize(tag, config) for tag in tags2 or ()} - {""}
    
    union = set1 | set2
    if not union:
        return 0.0
    
    return len(set1 & set2) / len(union)
