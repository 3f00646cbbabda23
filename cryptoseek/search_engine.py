"""
Main CryptoSeek class that orchestrates indexing and searching.

This module wires the configuration, storage, index builder, codec and
query engine together into the two user-facing operations: building the
obfuscated index from a documents directory, and searching it.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .tokenizer import Tokenizer
from .indexer import Index, Indexer
from .codec import IndexCodec
from .query import NotFound, QueryEngine, QueryResult
from .storage import DocumentStore, IndexUnreadableError
from .utils import ResultFormatter
import config

logger = logging.getLogger(__name__)


class Config:
    """Explicit configuration object: module defaults plus overrides."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        for key in dir(config):
            if key.isupper():
                setattr(self, key, getattr(config, key))
        for key, value in (config_dict or {}).items():
            setattr(self, key, value)
        self.DOCS_DIR = Path(self.DOCS_DIR)
        self.INDEX_FILE = Path(self.INDEX_FILE)


class CryptoSeek:
    """
    Main class that provides a unified interface for indexing and search.

    Each ``build_index`` call rebuilds the index from scratch and
    overwrites the index file; each ``search`` call reloads it from disk.
    """

    def __init__(self, docs_dir: Optional[str] = None, index_file: Optional[str] = None,
                 config_dict: Optional[Dict] = None):
        """
        Initialize CryptoSeek.

        Args:
            docs_dir: Directory of documents to index. If None, uses config default.
            index_file: Path of the obfuscated index file. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        overrides = dict(config_dict or {})
        if docs_dir is not None:
            overrides["DOCS_DIR"] = docs_dir
        if index_file is not None:
            overrides["INDEX_FILE"] = index_file
        self.config = Config(overrides)

        # Initialize components
        self.tokenizer = Tokenizer(self.config)
        self.indexer = Indexer(self.config, tokenizer=self.tokenizer)
        self.codec = IndexCodec(self.config.XOR_KEY, encoding=self.config.ENCODING)
        self.query_engine = QueryEngine(self.config)
        self.store = DocumentStore(self.config)
        self.result_formatter = ResultFormatter(self.config)

    @property
    def docs_dir(self) -> Path:
        return self.config.DOCS_DIR

    @property
    def index_file(self) -> Path:
        return self.config.INDEX_FILE

    def build_index(self) -> Index:
        """
        Index every document in the documents directory and write the index file.

        Returns:
            The freshly built index.

        Raises:
            IndexWriteError: If the index file cannot be written.
        """
        corpus = self.store.load_documents(self.docs_dir, self.config.TEXT_EXTENSIONS)
        index = self.indexer.build_inverted_index(corpus)
        self.store.write_index_bytes(self.index_file, self.codec.encode(index))
        return index

    def load_index(self) -> Index:
        """
        Read and decode the index file.

        An unreadable index file is reported on stderr and treated as an
        empty index so that searching degrades instead of failing.
        """
        try:
            data = self.store.read_index_bytes(self.index_file)
        except IndexUnreadableError as e:
            logger.debug("%s", e)
            print("ERROR: Could not open index file", file=sys.stderr)
            return {}
        return self.codec.decode(data)

    def search(self, word: str, index: Optional[Index] = None) -> QueryResult:
        """
        Look up a single word.

        Args:
            word: Raw query word.
            index: Already loaded index; read from disk when None.

        Returns:
            Found or NotFound.
        """
        if index is None:
            index = self.load_index()
        return self.query_engine.lookup(index, word)

    def similar_terms(self, result: QueryResult, index: Index) -> List[Tuple[str, int]]:
        """Edit-distance close matches for a missed lookup; empty for a hit."""
        if not isinstance(result, NotFound):
            return []
        return self.query_engine.similar_terms(index, result.term)

    def get_stats(self, index: Index) -> Dict[str, Any]:
        """
        Get statistics about an index.

        Returns:
            Dictionary containing various statistics.
        """
        stats = self.indexer.index_stats(index)
        stats["index_file"] = str(self.index_file)
        return stats
