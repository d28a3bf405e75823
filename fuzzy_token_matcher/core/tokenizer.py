"""Splitting text into filtered tokens."""

from typing import Iterable, List, Optional

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig
from .normalizer import normalize


def tokenize(text: Optional[str], config: TokenizerConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Tokenize text into normalized words.
    
    Words are split on whitespace and normalized one by one, so punctuation
    inside a word joins its fragments ("Programming-Skills" gives
    "programmingskills"). Words shorter than ``config.min_token_length`` and
    stop words are dropped. Order and repeats are kept.
    
    Args:
        text: Input text, may be None
        config: Tokenizer configuration
        
    Returns:
        List of tokens
    """
    if not text or not text.strip():
        return []
    
    tokens = []
    for word in text.split():
        token = normalize(word, config)
        if len(token) < config.min_token_length or token in config.stop_words:
            continue
        tokens.append(token)
    
    return tokens


def remove_duplicates(tokens: Optional[Iterable[str]]) -> List[str]:
    """Collapse repeated tokens, keeping the first occurrence of each."""
    if not tokens:
        return []
    
    return list(dict.fromkeys(tokens))
