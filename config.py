"""
Configuration settings for CryptoSeek.

This module contains all configurable parameters for the indexer.
Modify these values to customize the behavior of the system, or override
them per run through ``CryptoSeek(config_dict=...)`` or the CLI flags.
"""

from pathlib import Path

# Paths
DOCS_DIR = Path("documents")  # Directory containing documents to index
INDEX_FILE = Path("encrypted.idx")  # Output index file

# Obfuscation settings (XOR with a single byte; NOT encryption)
XOR_KEY = ord("K")

# File extensions
TEXT_EXTENSIONS = [".txt"]  # Only these files are indexed

# Text decoding
ENCODING = "utf-8"
ENCODING_ERRORS = "ignore"  # How undecodable document bytes are handled

# Similar-term settings (search --similar)
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for close matches
MAX_SIMILAR_TERMS = 5  # Number of close matches to show

# Output settings
RESULT_BULLET = " - "  # Prefix for result and suggestion lines

# Debug settings
LOG_LEVEL = "WARNING"  # Logging level: DEBUG, INFO, WARNING, ERROR
