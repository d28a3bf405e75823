"""Unit tests for the trigram index."""

import pytest

from fuzzy_token_matcher.core.index import TrigramIndex


class TestTrigramIndex:
    """Test cases for the TrigramIndex class."""
    
    @pytest.fixture
    def index(self):
        """Create a trigram index with a few documents."""
        index = TrigramIndex()
        index.add("1", "Java Programming")
        index.add("2", "Python Programming")
        index.add("3", "Garden Tools")
        return index
    
    def test_initialization(self):
        """Test an empty index."""
        index = TrigramIndex()
        
        assert len(index) == 0
        assert index.get_stats()["total_documents"] == 0
        assert index.get_stats()["last_updated"] is None
        assert index.lookup("java") == []
    
    def test_add(self, index):
        """Test adding documents."""
        assert len(index) == 3
        assert "1" in index
        assert index.get_stats()["total_documents"] == 3
        assert index.get_stats()["last_updated"] is not None
        assert {"java", "programming", "jav", "pro"} <= index.get_keys("1")
    
    def test_exact_token_lookup(self, index):
        """Test lookup by a whole token."""
        assert index.lookup("java") == ["1"]
    
    def test_ties_in_insertion_order(self, index):
        """Test that equally good hits keep insertion order."""
        assert index.lookup("programming") == ["1", "2"]
    
    def test_fuzzy_lookup(self, index):
        """Test that a misspelled query still finds documents by trigrams."""
        results = index.lookup("programing")
        
        assert results == ["1", "2"]
    
    def test_partial_overlap_ranked_last(self, index):
        """Test that a document sharing a single trigram trails the full matches."""
        index.add("4", "Cooking Recipes")
        
        # "cooking" shares only the "ing" trigram
        assert index.lookup("programing") == ["1", "2", "4"]
        assert index.lookup("garden") == ["3"]
    
    def test_ranked_by_shared_keys(self, index):
        """Test that more shared keys rank higher."""
        assert index.lookup("python programming")[0] == "2"
    
    def test_limit(self, index):
        """Test truncating the candidate list."""
        assert index.lookup("programming", limit=1) == ["1"]
    
    def test_empty_lookup(self, index):
        """Test that empty text finds nothing."""
        assert index.lookup("") == []
        assert index.lookup(None) == []
    
    def test_remove(self, index):
        """Test removing a document."""
        assert index.remove("1") is True
        assert "1" not in index
        assert index.lookup("java") == []
        assert index.lookup("programming") == ["2"]
    
    def test_remove_missing(self, index):
        """Test removing an unknown document."""
        assert index.remove("missing") is False
        assert len(index) == 3
    
    def test_replace(self, index):
        """Test that re-adding an id replaces its keys."""
        index.add("1", "Rust Systems")
        
        assert len(index) == 3
        assert index.lookup("java") == []
        assert index.lookup("rust") == ["1"]
        assert index.lookup("programming") == ["2"]
    
    def test_get_keys_missing(self, index):
        """Test keys of an unknown document."""
        assert index.get_keys("missing") is None
    
    def test_clear(self, index):
        """Test clearing the index."""
        index.clear()
        
        assert len(index) == 0
        assert index.lookup("java") == []
        assert index.get_stats()["total_keys"] == 0
