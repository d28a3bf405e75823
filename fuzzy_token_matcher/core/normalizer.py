"""Text normalization utilities for consistent token processing."""

import re
from functools import lru_cache
from typing import FrozenSet, Optional, Pattern

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig

# Everything outside the canonical alphabet
_STRIP_REGEX = re.compile(r"[^a-z0-9]")


@lru_cache(maxsize=32)
def _symbol_run_regex(symbols: FrozenSet[str]) -> Optional[Pattern[str]]:
    """Match a run of substitutable symbols that trails a word and ends it."""
    if not symbols:
        return None
    
    char_class = "".join(re.escape(symbol) for symbol in sorted(symbols))
    return re.compile(rf"(?<=[a-z0-9])[{char_class}]+(?![a-z0-9])")


def normalize(text: Optional[str], config: TokenizerConfig = DEFAULT_CONFIG) -> str:
    """
    Fold text to its canonical lowercase alphanumeric form.
    
    Trailing symbol runs listed in ``config.symbol_substitutions`` are spelled
    out first, so "C#" becomes "csharp" and "C++" becomes "cplusplus". Any
    other character outside ``[a-z0-9]`` is removed, which merges the
    fragments around it.
    
    Args:
        text: Input text to normalize, may be None
        config: Tokenizer configuration
        
    Returns:
        Normalized text, empty for absent or blank input
    """
    if not text:
        return ""
    
    normalized = text.lower()
    
    substitutions = config.substitution_table()
    symbol_regex = _symbol_run_regex(frozenset(substitutions))
    if symbol_regex is not None:
        normalized = symbol_regex.sub(
            lambda match: "".join(substitutions[symbol] for symbol in match.group(0)),
            normalized,
        )
    
    return _STRIP_REGEX.sub("", normalized)
