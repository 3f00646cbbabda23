"""
Inverted index construction and management.

This module handles building the word-to-documents mapping from a corpus
of (document id, text) pairs and answering simple questions about it.
"""

import logging
from typing import Any, Dict, Iterable, List, Set, Tuple
from collections import defaultdict

from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

Index = Dict[str, List[str]]


class Indexer:
    """Handles inverted index construction and management."""

    def __init__(self, config=None, tokenizer: Tokenizer = None):
        """Initialize with configuration."""
        self.config = config
        self.tokenizer = tokenizer or Tokenizer(config)

    def build_inverted_index(self, corpus: Iterable[Tuple[str, str]]) -> Index:
        """
        Build an inverted index from a corpus.

        Args:
            corpus: Iterable of (doc_id, text) pairs.

        Returns:
            Dictionary mapping term -> list of doc_ids containing it.
            Terms and posting lists are sorted so the result does not
            depend on the order documents were fed in.
        """
        postings = defaultdict(set)  # term -> set of doc_ids
        num_docs = 0

        for doc_id, text in corpus:
            num_docs += 1
            for term in self.tokenizer.tokenize(text):
                postings[term].add(doc_id)

        inverted_index = {}
        for term in sorted(postings):
            inverted_index[term] = sorted(postings[term])

        logger.info("Built inverted index: %d terms across %d documents",
                    len(inverted_index), num_docs)
        return inverted_index

    def get_posting_list(self, term: str, inverted_index: Index) -> List[str]:
        """
        Get the posting list for a term.

        Args:
            term: Normalized term to look up.
            inverted_index: The inverted index.

        Returns:
            List of doc_ids for the term, empty if absent.
        """
        return inverted_index.get(term, [])

    def get_document_frequency(self, term: str, inverted_index: Index) -> int:
        """Number of documents containing the term."""
        return len(self.get_posting_list(term, inverted_index))

    def get_documents_containing(self, terms: List[str], inverted_index: Index) -> Set[str]:
        """
        Get the set of documents containing any of the given terms.

        Args:
            terms: Terms to search for.
            inverted_index: The inverted index.

        Returns:
            Set of doc_ids containing at least one of the terms.
        """
        doc_ids = set()
        for term in terms:
            doc_ids.update(self.get_posting_list(term, inverted_index))
        return doc_ids

    def index_stats(self, inverted_index: Index) -> Dict[str, Any]:
        """
        Compute summary statistics of the inverted index.

        Args:
            inverted_index: The inverted index.

        Returns:
            Dictionary of statistics.
        """
        num_terms = len(inverted_index)
        posting_lengths = [self.get_document_frequency(term, inverted_index) for term in inverted_index]
        total_postings = sum(posting_lengths)
        documents = self.get_documents_containing(list(inverted_index), inverted_index)

        stats = {
            "unique_terms": num_terms,
            "total_postings": total_postings,
            "documents_indexed": len(documents),
            "avg_postings_per_term": round(total_postings / num_terms, 2) if num_terms else 0,
            "min_posting_length": min(posting_lengths) if posting_lengths else 0,
            "max_posting_length": max(posting_lengths) if posting_lengths else 0,
        }
        return stats
