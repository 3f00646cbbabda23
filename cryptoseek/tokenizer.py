"""
Token normalization module.

This module turns raw whitespace-delimited tokens into the canonical
terms used as index keys.
"""

import string
from typing import List

# Maps every ASCII punctuation character to None (deleted) and A-Z to a-z.
# Non-ASCII characters pass through untouched, so the mapping does not
# depend on the active locale.
_NORMALIZE_TABLE = str.maketrans(
    string.ascii_uppercase,
    string.ascii_lowercase,
    string.punctuation,
)


def normalize(token: str) -> str:
    """
    Normalize a raw token into an index term.

    Punctuation is removed rather than replaced (``"don't"`` becomes
    ``"dont"``) and ASCII letters are lowercased. The result may be empty,
    in which case the token is not indexable.

    Args:
        token: Raw token.

    Returns:
        Normalized term, possibly empty.
    """
    return token.translate(_NORMALIZE_TABLE)


class Tokenizer:
    """Splits text into tokens and normalizes them into terms."""

    def __init__(self, config=None):
        """Initialize with configuration."""
        self.config = config

    def split_tokens(self, text: str) -> List[str]:
        """Split text into runs of non-whitespace characters."""
        return text.split()

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into normalized, non-empty terms.

        Args:
            text: Raw document text.

        Returns:
            List of terms in document order, duplicates included.
        """
        terms = []
        for token in self.split_tokens(text):
            term = normalize(token)
            if term:
                terms.append(term)
        return terms

