"""
CryptoSeek

A small inverted-index search tool that stores its index in an
XOR-obfuscated file and suggests related words on a miss.

Main components:
- CryptoSeek: Main class tying indexing and search together
- Tokenizer: Whitespace tokenization and term normalization
- Indexer: Inverted index construction
- IndexCodec: On-disk record format and XOR obfuscation
- QueryEngine: Exact lookup and substring suggestions
- DocumentStore: Flat documents directory and index file access
- ResultFormatter: Console output
"""

from .search_engine import CryptoSeek, Config
from .tokenizer import Tokenizer, normalize
from .indexer import Indexer
from .codec import IndexCodec, CodecError, xor_transform
from .query import QueryEngine, Found, NotFound
from .storage import DocumentStore, StorageError, IndexUnreadableError, IndexWriteError
from .utils import ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "CryptoSeek",
    "Config",
    "Tokenizer",
    "normalize",
    "Indexer",
    "IndexCodec",
    "CodecError",
    "xor_transform",
    "QueryEngine",
    "Found",
    "NotFound",
    "DocumentStore",
    "StorageError",
    "IndexUnreadableError",
    "IndexWriteError",
    "ResultFormatter",
]
