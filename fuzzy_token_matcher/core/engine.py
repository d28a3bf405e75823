"""Document search engine built on the token and trigram utilities."""

import time
from typing import Any, Dict, Iterable, List, Optional

import structlog

from ..config import Settings, get_settings
from ..models.document import Document
from ..models.response import ScoredDocument, SearchResponse
from ..models.tokenizer import TokenizerConfig
from .fuzzy_matcher import FuzzyMatcher
from .index import TrigramIndex
from .similarity import tag_similarity, text_similarity

logger = structlog.get_logger(__name__)

# Weights for comparing two documents with each other
RELATED_TITLE_WEIGHT = 0.5
RELATED_CONTENT_WEIGHT = 0.3
RELATED_TAG_WEIGHT = 0.2
SAME_SUBJECT_BONUS = 0.2

_STAT_BY_MATCH_TYPE = {
    "exact": "exact_matches",
    "fuzzy": "fuzzy_matches",
    "recent": "recent_listings",
    "none": "no_matches",
}


class SearchEngine:
    """Exact and fuzzy search over an in-memory collection of documents."""
    
    def __init__(
        self, 
        settings: Optional[Settings] = None, 
        config: Optional[TokenizerConfig] = None
    ) -> None:
        """
        Initialize the search engine.
        
        Args:
            settings: Engine settings (cached application settings if None)
            config: Tokenizer configuration (derived from settings if None)
        """
        self.settings = settings or get_settings()
        self.config = config or self.settings.tokenizer_config()
        self.index = TrigramIndex(self.config)
        self.fuzzy_matcher = FuzzyMatcher(self.settings.suggestion_threshold, self.config)
        
        self._documents: Dict[str, Document] = {}
        self._sequence: Dict[str, int] = {}
        self._next_sequence = 0
        self._stats = self._empty_stats()
    
    def add_document(self, document: Document) -> None:
        """
        Add a document, replacing any document with the same id.
        
        Args:
            document: The document to index
        """
        self._documents.pop(document.doc_id, None)
        self._documents[document.doc_id] = document
        self._sequence[document.doc_id] = self._next_sequence
        self._next_sequence += 1
        
        self.index.add(document.doc_id, document.indexable_text())
        logger.debug("document_added", doc_id=document.doc_id)
    
    def load_documents(self, documents: Iterable[Document]) -> None:
        """Add several documents in order."""
        count = 0
        for document in documents:
            self.add_document(document)
            count += 1
        logger.info("documents_loaded", count=count, total_documents=len(self._documents))
    
    def remove_document(self, doc_id: str) -> bool:
        """
        Remove a document.
        
        Args:
            doc_id: The document identifier
            
        Returns:
            True if removed, False if not found
        """
        if self._documents.pop(doc_id, None) is None:
            return False
        
        del self._sequence[doc_id]
        self.index.remove(doc_id)
        logger.debug("document_removed", doc_id=doc_id)
        return True
    
    def get_document(self, doc_id: str) -> Optional[Document]:
        """Get a document by id."""
        return self._documents.get(doc_id)
    
    def search_exact(
        self, 
        query: Optional[str], 
        limit: Optional[int] = None, 
        offset: int = 0,
        subject: Optional[str] = None,
        tags: Optional[Iterable[str]] = None
    ) -> List[ScoredDocument]:
        """
        Find documents whose title or content contains the query verbatim.
        
        The comparison ignores case and surrounding whitespace.
        
        Args:
            query: Search query
            limit: Maximum number of results (settings.max_results if None)
            offset: Number of results to skip
            subject: Only documents with this subject
            tags: Only documents carrying every one of these tags
            
        Returns:
            Matching documents in insertion order, each scored 1.0
        """
        if not query or not query.strip():
            return []
        
        needle = query.strip().lower()
        matches = [
            ScoredDocument(document=document, score=1.0)
            for document in self._filtered(subject, tags)
            if needle in document.title.lower() or needle in document.content.lower()
        ]
        return self._paginate(matches, limit, offset)
    
    def search_fuzzy(
        self, 
        query: Optional[str], 
        limit: Optional[int] = None, 
        offset: int = 0,
        subject: Optional[str] = None,
        tags: Optional[Iterable[str]] = None
    ) -> List[ScoredDocument]:
        """
        Search with typo tolerance, preferring exact matches when there are any.
        
        Args:
            query: Search query
            limit: Maximum number of results (settings.max_results if None)
            offset: Number of results to skip
            subject: Only documents with this subject
            tags: Only documents carrying every one of these tags
            
        Returns:
            Matching documents ordered by relevance
        """
        if not query or not query.strip():
            return []
        
        tags = None if tags is None else list(tags)
        exact = self.search_exact(query, limit, offset, subject, tags)
        if exact:
            return exact
        
        return self._paginate(self._rank_fuzzy(query, subject, tags), limit, offset)
    
    def search(
        self, 
        query: Optional[str], 
        limit: Optional[int] = None, 
        offset: int = 0,
        subject: Optional[str] = None,
        tags: Optional[Iterable[str]] = None
    ) -> SearchResponse:
        """
        Search documents, falling back from exact to fuzzy matching.
        
        A blank query lists the most recently added documents.
        
        Args:
            query: Search query
            limit: Maximum number of results (settings.max_results if None)
            offset: Number of results to skip
            subject: Only documents with this subject
            tags: Only documents carrying every one of these tags
            
        Returns:
            SearchResponse with results and metadata
        """
        start_time = time.time()
        tags = None if tags is None else list(tags)
        self._stats["total_queries"] += 1
        suggestions = None
        
        if not query or not query.strip():
            recent = [
                ScoredDocument(document=document, score=0.0)
                for document in reversed(self._filtered(subject, tags))
            ]
            results = self._paginate(recent, limit, offset)
            match_type = "recent"
        else:
            results = self.search_exact(query, limit, offset, subject, tags)
            match_type = "exact"
            if not results:
                results = self._paginate(self._rank_fuzzy(query, subject, tags), limit, offset)
                match_type = "fuzzy"
            if not results:
                match_type = "none"
                suggestions = self.fuzzy_matcher.suggest_terms(query, self.tag_vocabulary())
        
        self._stats[_STAT_BY_MATCH_TYPE[match_type]] += 1
        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time
        
        logger.info(
            "search_completed",
            query=query,
            match_type=match_type,
            subject=subject,
            results=len(results),
            execution_time_ms=round(execution_time, 3),
        )
        
        return SearchResponse(
            query=query or "",
            match_type=match_type,
            total_results=len(results),
            results=results,
            execution_time_ms=execution_time,
            suggestions=suggestions,
        )
    
    def related_documents(self, doc_id: str, limit: int = 5) -> List[ScoredDocument]:
        """
        Find documents similar to a given one.
        
        Candidates share match keys with the source title and tags and, when
        the source has a subject, belong to the same subject.
        
        Args:
            doc_id: The source document identifier
            limit: Maximum number of results
            
        Returns:
            Related documents ordered by similarity, source excluded
        """
        source = self._documents.get(doc_id)
        if source is None or limit <= 0:
            return []
        
        lookup_text = " ".join([source.title, *source.tags])
        candidates = self.index.lookup(lookup_text, self.settings.max_fuzzy_candidates)
        
        scored = []
        for candidate_id in candidates:
            if candidate_id == doc_id:
                continue
            candidate = self._documents[candidate_id]
            if source.subject is not None and candidate.subject != source.subject:
                continue
            scored.append(
                ScoredDocument(document=candidate, score=self._document_similarity(source, candidate))
            )
        
        scored.sort(key=self._ranking_key)
        return scored[:limit]
    
    def tag_vocabulary(self) -> List[str]:
        """Distinct tag names across all documents, in first-seen order."""
        vocabulary: Dict[str, None] = {}
        for document in self._documents.values():
            for tag in document.tags:
                vocabulary.setdefault(tag, None)
        return list(vocabulary)
    
    def suggest(self, text: Optional[str], limit: int = 5) -> List[str]:
        """Suggest known tag names for partially typed text."""
        return self.fuzzy_matcher.suggest_terms(text, self.tag_vocabulary(), limit)
    
    def _rank_fuzzy(
        self, 
        query: str, 
        subject: Optional[str] = None, 
        tags: Optional[Iterable[str]] = None
    ) -> List[ScoredDocument]:
        """Score index candidates against the query and keep the relevant ones."""
        if subject is None and not tags:
            candidates = self.index.lookup(query, self.settings.max_fuzzy_candidates)
        else:
            allowed = {document.doc_id for document in self._filtered(subject, tags)}
            candidates = [
                doc_id for doc_id in self.index.lookup(query) if doc_id in allowed
            ][:self.settings.max_fuzzy_candidates]
        
        scored = []
        for candidate_id in candidates:
            document = self._documents[candidate_id]
            score = self._relevance_score(query, document)
            if score >= self.settings.similarity_threshold:
                scored.append(ScoredDocument(document=document, score=score))
        
        scored.sort(key=self._ranking_key)
        logger.debug(
            "fuzzy_candidates_scored",
            query=query,
            candidates=len(candidates),
            relevant=len(scored),
        )
        return scored
    
    def _filtered(
        self, 
        subject: Optional[str], 
        tags: Optional[Iterable[str]]
    ) -> List[Document]:
        """Documents in insertion order that belong to the subject and carry all tags."""
        required = {tag.strip().lower() for tag in tags or () if tag and tag.strip()}
        documents = []
        for document in self._documents.values():
            if subject is not None and document.subject != subject:
                continue
            if required and not required <= {tag.lower() for tag in document.tags}:
                continue
            documents.append(document)
        return documents
    
    def _relevance_score(self, query: str, document: Document) -> float:
        title_score = text_similarity(query, document.title, self.config)
        content_score = text_similarity(query, document.content, self.config)
        score = (
            self.settings.title_weight * title_score
            + self.settings.content_weight * content_score
        )
        return min(1.0, score)
    
    def _document_similarity(self, first: Document, second: Document) -> float:
        score = (
            RELATED_TITLE_WEIGHT * text_similarity(first.title, second.title, self.config)
            + RELATED_CONTENT_WEIGHT * text_similarity(first.content, second.content, self.config)
            + RELATED_TAG_WEIGHT * tag_similarity(first.tags, second.tags, self.config)
        )
        if first.subject is not None and first.subject == second.subject:
            score += SAME_SUBJECT_BONUS
        return min(1.0, score)
    
    def _ranking_key(self, result: ScoredDocument) -> tuple:
        return (-result.score, self._sequence[result.document.doc_id])
    
    def _paginate(
        self, 
        results: List[ScoredDocument], 
        limit: Optional[int], 
        offset: int
    ) -> List[ScoredDocument]:
        limit = self.settings.max_results if limit is None else limit
        offset = max(offset, 0)
        if limit <= 0:
            return []
        return results[offset:offset + limit]
    
    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "recent_listings": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
        }
    
    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()
        
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0
        
        stats["total_documents"] = len(self._documents)
        stats["index_stats"] = self.index.get_stats()
        
        return stats
    
    def clear(self) -> None:
        """Clear all documents and reset statistics."""
        self._documents.clear()
        self._sequence.clear()
        self._next_sequence = 0
        self.index.clear()
        self._stats = self._empty_stats()
