"""Character trigram fingerprints for fuzzy matching."""

from typing import Iterable, List, Optional

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig

TRIGRAM_SIZE = 3


def generate_trigrams(token: Optional[str], config: TokenizerConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Generate the sliding 3-character windows of a token.
    
    Tokens shorter than ``config.min_trigram_token_length`` give nothing:
    their only useful comparison is an exact one.
    
    Args:
        token: Token to fingerprint, may be None
        config: Tokenizer configuration
        
    Returns:
        Trigrams in left-to-right order, repeats included
    """
    if not token or len(token) < config.min_trigram_token_length:
        return []
    
    return [token[i:i + TRIGRAM_SIZE] for i in range(len(token) - TRIGRAM_SIZE + 1)]


def generate_all_trigrams(
    tokens: Optional[Iterable[str]], 
    config: TokenizerConfig = DEFAULT_CONFIG
) -> List[str]:
    """
    Generate the distinct trigrams of a batch of tokens.
    
    Args:
        tokens: Tokens to fingerprint, may be None
        config: Tokenizer configuration
        
    Returns:
        Distinct trigrams in first-seen order
    """
    if not tokens:
        return []
    
    trigrams = {}
    for token in tokens:
        for trigram in generate_trigrams(token, config):
            trigrams.setdefault(trigram, None)
    
    return list(trigrams)
