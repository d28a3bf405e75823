"""Unit tests for the fuzzy matcher functionality."""

import pytest

from fuzzy_token_matcher.core.fuzzy_matcher import FuzzyMatcher


class TestFuzzyMatcher:
    """Test cases for the FuzzyMatcher class."""
    
    @pytest.fixture
    def matcher(self):
        """Create a fuzzy matcher instance for testing."""
        return FuzzyMatcher(threshold=0.3)
    
    @pytest.fixture
    def vocabulary(self):
        """Sample tag names for testing."""
        return ["java", "javascript", "python", "programming", "spring"]
    
    def test_matcher_initialization(self, matcher):
        """Test fuzzy matcher initialization."""
        assert matcher.threshold == 0.3
        assert matcher.config is not None
    
    def test_exact_match(self, matcher, vocabulary):
        """Test case-insensitive exact matching."""
        assert matcher.find_best_match("JAVA", vocabulary) == ("java", 1.0)
    
    def test_misspelled_query(self, matcher, vocabulary):
        """Test typo correction."""
        word, score = matcher.find_best_match("programing", vocabulary)
        
        assert word == "programming"
        assert score == pytest.approx(0.7)
    
    def test_prefix_query(self, matcher, vocabulary):
        """Test a short prefix typed so far."""
        word, score = matcher.find_best_match("Jav", vocabulary)
        
        assert word == "java"
        assert score == pytest.approx(0.75)
    
    def test_custom_threshold(self, matcher, vocabulary):
        """Test that a stricter threshold drops weaker candidates."""
        matches = matcher.find_multiple_matches("jav", vocabulary, threshold=0.5)
        
        assert matches == [("java", pytest.approx(0.75))]
    
    def test_no_match_below_threshold(self, matcher, vocabulary):
        """Test no match when similarity is below threshold."""
        assert matcher.find_best_match("xyz123", vocabulary) is None
    
    def test_multiple_matches_sorted(self, matcher, vocabulary):
        """Test that results are sorted by similarity, descending."""
        results = matcher.find_multiple_matches("java", vocabulary)
        
        assert results[0] == ("java", 1.0)
        scores = [score for _, score in results]
        assert scores == sorted(scores, reverse=True)
        assert all(0.0 < score <= 1.0 for score in scores)
    
    def test_max_results(self, matcher, vocabulary):
        """Test the result limit."""
        assert len(matcher.find_multiple_matches("java", vocabulary, max_results=1)) == 1
    
    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_empty_query(self, matcher, vocabulary, query):
        """Test handling of empty query."""
        assert matcher.find_best_match(query, vocabulary) is None
        assert matcher.suggest_terms(query, vocabulary) == []
    
    def test_empty_candidates(self, matcher):
        """Test handling of empty candidates list."""
        assert matcher.find_best_match("java", []) is None
        assert matcher.suggest_terms("java", None) == []
    
    def test_suggestions(self, matcher, vocabulary):
        """Test suggestion generation."""
        suggestions = matcher.suggest_terms("programing", vocabulary, limit=3)
        
        assert len(suggestions) <= 3
        assert suggestions[0] == "programming"
    
    def test_duplicate_candidates_collapsed(self, matcher):
        """Test that each candidate is suggested once."""
        suggestions = matcher.suggest_terms("java", ["java", "java", "javascript"])
        
        assert suggestions.count("java") == 1
    
    def test_ties_in_vocabulary_order(self, matcher):
        """Test that equally similar candidates keep their vocabulary order."""
        vocabulary = ["javd", "javb", "javc", "python"]
        
        matches = matcher.find_multiple_matches("jav", vocabulary, max_results=None)
        assert matches == [
            ("javd", pytest.approx(0.75)),
            ("javb", pytest.approx(0.75)),
            ("javc", pytest.approx(0.75)),
        ]
        assert [term for term, _ in matcher.find_multiple_matches("jav", vocabulary, max_results=2)] == [
            "javd", "javb",
        ]
        assert matcher.suggest_terms("jav", vocabulary, limit=2) == ["javd", "javb"]
        assert matcher.find_best_match("jav", vocabulary)[0] == "javd"
