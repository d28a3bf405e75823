"""In-memory trigram index mapping match keys to document ids."""

import time
from collections import defaultdict
from typing import Any, Dict, List, Optional, Set

import structlog

from ..models.tokenizer import DEFAULT_CONFIG, TokenizerConfig
from .query import process_search_query

logger = structlog.get_logger(__name__)


class TrigramIndex:
    """Inverted index from tokens and trigrams to the documents containing them."""
    
    def __init__(self, config: TokenizerConfig = DEFAULT_CONFIG) -> None:
        """
        Initialize the trigram index.
        
        Args:
            config: Tokenizer configuration used to derive match keys
        """
        self.config = config
        self._postings: Dict[str, Set[str]] = defaultdict(set)
        self._keys_by_doc: Dict[str, Set[str]] = {}
        self._order: Dict[str, int] = {}
        self._sequence = 0
        self._stats = {
            "total_documents": 0,
            "total_keys": 0,
            "last_updated": None
        }
    
    def add(self, doc_id: str, text: Optional[str]) -> None:
        """
        Index a document's text, replacing any earlier entry for the id.
        
        Args:
            doc_id: Document identifier
            text: Text whose match keys should point at the document
        """
        if doc_id in self._keys_by_doc:
            self._unlink(doc_id)
        
        keys = process_search_query(text, self.config)
        for key in keys:
            self._postings[key].add(doc_id)
        
        self._keys_by_doc[doc_id] = keys
        self._order[doc_id] = self._sequence
        self._sequence += 1
        
        self._update_stats()
        logger.debug("document_indexed", doc_id=doc_id, match_keys=len(keys))
    
    def remove(self, doc_id: str) -> bool:
        """
        Remove a document from the index.
        
        Args:
            doc_id: Document identifier
            
        Returns:
            True if removed, False if not found
        """
        if doc_id not in self._keys_by_doc:
            return False
        
        self._unlink(doc_id)
        self._update_stats()
        logger.debug("document_unindexed", doc_id=doc_id)
        return True
    
    def lookup(self, text: Optional[str], limit: Optional[int] = None) -> List[str]:
        """
        Find documents sharing match keys with a text.
        
        Args:
            text: Query text
            limit: Maximum number of ids to return, None for all
            
        Returns:
            Document ids ordered by shared key count (descending), then by
            insertion order
        """
        hits: Dict[str, int] = defaultdict(int)
        for key in process_search_query(text, self.config):
            for doc_id in self._postings.get(key, ()):
                hits[doc_id] += 1
        
        ranked = sorted(hits, key=lambda doc_id: (-hits[doc_id], self._order[doc_id]))
        return ranked if limit is None else ranked[:limit]
    
    def get_keys(self, doc_id: str) -> Optional[Set[str]]:
        """Get the match keys indexed for a document."""
        keys = self._keys_by_doc.get(doc_id)
        return set(keys) if keys is not None else None
    
    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._keys_by_doc
    
    def __len__(self) -> int:
        return len(self._keys_by_doc)
    
    def clear(self) -> None:
        """Clear all postings."""
        self._postings.clear()
        self._keys_by_doc.clear()
        self._order.clear()
        self._sequence = 0
        self._stats = {
            "total_documents": 0,
            "total_keys": 0,
            "last_updated": None
        }
    
    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return self._stats.copy()
    
    def _unlink(self, doc_id: str) -> None:
        for key in self._keys_by_doc.pop(doc_id):
            postings = self._postings.get(key)
            if postings is None:
                continue
            postings.discard(doc_id)
            if not postings:
                del self._postings[key]
        del self._order[doc_id]
    
    def _update_stats(self) -> None:
        self._stats["total_documents"] = len(self._keys_by_doc)
        self._stats["total_keys"] = len(self._postings)
        self._stats["last_updated"] = time.time()
