"""
Query processing module.

This module answers single-word lookups against a loaded index: an exact
match returns the documents holding the term, a miss returns every
indexed term containing the query as a substring. Optional close matches
by Levenshtein distance are available separately.
"""

from typing import Dict, List, NamedTuple, Tuple, Union
from rapidfuzz.distance import Levenshtein

from .tokenizer import normalize


class Found(NamedTuple):
    """The normalized query is an indexed term."""
    term: str
    documents: List[str]


class NotFound(NamedTuple):
    """The normalized query is not indexed; ``suggestions`` may be empty."""
    term: str
    suggestions: List[str]


QueryResult = Union[Found, NotFound]


class QueryEngine:
    """Handles exact lookups and substring suggestions."""

    def __init__(self, config=None):
        """Initialize with configuration."""
        self.config = config

    def lookup(self, index: Dict[str, List[str]], raw_query: str) -> QueryResult:
        """
        Look up a raw query word.

        Args:
            index: Mapping of term -> list of doc_ids.
            raw_query: Word as typed by the user; normalized here.

        Returns:
            Found with the posting list in index order, or NotFound with
            substring suggestions in index order. An empty normalized query
            matches nothing and suggests every term.
        """
        term = normalize(raw_query)
        documents = index.get(term)
        if documents:
            return Found(term, list(documents))
        return NotFound(term, self.suggest(index, term))

    def suggest(self, index: Dict[str, List[str]], term: str) -> List[str]:
        """
        Return every indexed term that contains ``term`` as a substring.

        Args:
            index: Mapping of term -> list of doc_ids.
            term: Normalized query term.

        Returns:
            Matching terms in index enumeration order.
        """
        return [word for word in index if term in word]

    def similar_terms(self, index: Dict[str, List[str]], term: str, max_dist: int = None,
                      top_k: int = None) -> List[Tuple[str, int]]:
        """
        Get indexed terms within a small edit distance of ``term``.

        Args:
            index: Mapping of term -> list of doc_ids.
            term: Normalized query term.
            max_dist: Maximum edit distance to consider.
            top_k: Number of terms to return.

        Returns:
            List of (term, distance) tuples sorted by distance, then by
            document frequency (descending), then alphabetically.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE
        if top_k is None:
            top_k = self.config.MAX_SIMILAR_TERMS

        if not term:
            return []

        similar = []
        for word, doc_ids in index.items():
            # Length difference is a lower bound on edit distance
            if abs(len(word) - len(term)) > max_dist:
                continue
            dist = Levenshtein.distance(term, word, score_cutoff=max_dist)
            if dist <= max_dist:
                similar.append((word, dist, len(doc_ids)))

        similar.sort(key=lambda x: (x[1], -x[2], x[0]))
        return [(word, dist) for word, dist, _freq in similar[:top_k]]
