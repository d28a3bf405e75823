"""Ranking candidate terms against a query for autocomplete."""

from typing import Any, Iterable, List, Optional, Tuple

from rapidfuzz import process

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig
from .similarity import calculate_similarity


class FuzzyMatcher:
    """Ranks vocabulary terms (tag or subject names) by trigram similarity."""
    
    def __init__(self, threshold: float = 0.3, config: TokenizerConfig = DEFAULT_CONFIG) -> None:
        """
        Initialize the fuzzy matcher.
        
        Args:
            threshold: Minimum similarity for a candidate to be returned
            config: Tokenizer configuration used by the scorer
        """
        self.threshold = threshold
        self.config = config
    
    def _score(self, query: str, candidate: str, **kwargs: Any) -> float:
        return calculate_similarity(query, candidate, self.config)
    
    def find_multiple_matches(
        self, 
        query: Optional[str], 
        candidates: Optional[Iterable[str]], 
        max_results: Optional[int] = 10,
        threshold: Optional[float] = None
    ) -> List[Tuple[str, float]]:
        """
        Find the candidates most similar to a query.
        
        Args:
            query: Search query
            candidates: Candidate terms, duplicates are collapsed
            max_results: Maximum number of results, None for all
            threshold: Custom threshold (uses instance threshold if None)
            
        Returns:
            List of (candidate, similarity) sorted by similarity, descending
        """
        if not query or not query.strip() or not candidates:
            return []
        
        choices = list(dict.fromkeys(c for c in candidates if c))
        if not choices:
            return []
        
        threshold = self.threshold if threshold is None else threshold
        
        matches = process.extract(
            query,
            choices,
            scorer=self._score,
            limit=max_results,
            score_cutoff=threshold,
        )
        
        # rapidfuzz yields (choice, score, index) for list input; ties stay in vocabulary order
        matches = sorted(matches, key=lambda match: (-match[1], match[2]))
        return [(choice, score) for choice, score, _ in matches if score > 0.0]
    
    def find_best_match(
        self, 
        query: Optional[str], 
        candidates: Optional[Iterable[str]], 
        threshold: Optional[float] = None
    ) -> Optional[Tuple[str, float]]:
        """Return the single most similar candidate, or None below the threshold."""
        matches = self.find_multiple_matches(query, candidates, 1, threshold)
        return matches[0] if matches else None
    
    def suggest_terms(
        self, 
        query: Optional[str], 
        vocabulary: Optional[Iterable[str]], 
        limit: int = 5,
        threshold: Optional[float] = None
    ) -> List[str]:
        """
        Suggest vocabulary terms for a partially typed or misspelled query.
        
        Args:
            query: Text typed so far
            vocabulary: Known terms
            limit: Maximum number of suggestions
            threshold: Custom threshold
            
        Returns:
            List of suggested terms, best first
        """
        return [term for term, _ in self.find_multiple_matches(query, vocabulary, limit, threshold)]
