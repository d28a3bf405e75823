"""Unit tests for search query expansion."""

from fuzzy_token_matcher.core.query import process_search_query


class TestProcessSearchQuery:
    """Test cases for the process_search_query function."""
    
    def test_valid_query(self):
        """Test that tokens and their trigrams are present."""
        processed = process_search_query("Java Programming Java")
        
        assert isinstance(processed, set)
        assert {"java", "programming"} <= processed
        assert {"pro", "rog", "ogr"} <= processed
        assert {"jav", "ava"} <= processed
    
    def test_exact_key_set(self):
        """Test the complete expansion of a small query."""
        assert process_search_query("go lang") == {"go", "lang", "lan", "ang"}
    
    def test_short_token_only_itself(self):
        """Test that short tokens contribute no trigrams."""
        assert process_search_query("abc") == {"abc"}
    
    def test_empty_query(self):
        """Test that empty input yields an empty set."""
        assert process_search_query(None) == set()
        assert process_search_query("") == set()
        assert process_search_query("  the a in ") == set()
    
    def test_size(self):
        """Test that repeats do not inflate the key set."""
        processed = process_search_query("Java Programming Java")
        
        # 2 tokens, 2 trigrams from "java", 9 from "programming"
        assert len(processed) == 13
