"""Expansion of search queries into index match keys."""

from typing import Optional, Set

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig
from .tokenizer import remove_duplicates, tokenize
from .trigrams import generate_all_trigrams


def process_search_query(text: Optional[str], config: TokenizerConfig = DEFAULT_CONFIG) -> Set[str]:
    """
    Expand text into the set of keys used to look it up in a trigram index.
    
    The set holds every token plus the trigrams of the tokens long enough
    to have any, so one lookup covers exact-token and substring matches.
    
    Args:
        text: Query text, may be None
        config: Tokenizer configuration
        
    Returns:
        Set of tokens and trigrams
    """
    tokens = remove_duplicates(tokenize(text, config))
    
    match_keys = set(tokens)
    match_keys.update(generate_all_trigrams(tokens, config))
    
    return match_keys
