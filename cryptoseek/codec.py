"""
On-disk index codec.

The index is stored as one text record per term::

    term:doc1,doc2,\\n

Records are concatenated, UTF-8 encoded, and the whole stream is XORed
with a single fixed key byte. The XOR step is obfuscation only; it keeps
the file from being read at a glance and offers no confidentiality.
"""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = "\n"
FIELD_SEPARATOR = ":"
ID_SEPARATOR = ","


class CodecError(ValueError):
    """Raised when an index cannot be represented in the on-disk layout."""


def xor_transform(data: bytes, key: int) -> bytes:
    """
    XOR every byte of ``data`` with ``key``.

    The transform is its own inverse: applying it twice with the same key
    returns the original bytes. Not a security mechanism.

    Args:
        data: Input bytes (may be empty).
        key: Single-byte key, 0-255.

    Returns:
        Transformed bytes of the same length.
    """
    return data.translate(_xor_table(key))


def _xor_table(key: int) -> bytes:
    if not 0 <= key <= 255:
        raise ValueError(f"XOR key must fit in one byte, got {key!r}")
    return bytes(b ^ key for b in range(256))


class IndexCodec:
    """Serializes an inverted index to obfuscated bytes and back."""

    def __init__(self, key: int, encoding: str = "utf-8"):
        """
        Initialize the codec.

        Args:
            key: Single-byte XOR key.
            encoding: Text encoding of the record stream.
        """
        self.table = _xor_table(key)
        self.key = key
        self.encoding = encoding

    def transform(self, data: bytes) -> bytes:
        """Apply the XOR transform with this codec's key."""
        return data.translate(self.table)

    def encode_record(self, term: str, doc_ids: List[str]) -> str:
        """
        Format one (term, posting list) pair as a plaintext record.

        Raises:
            CodecError: If the pair cannot be decoded back unchanged.
        """
        if not term or any(sep in term for sep in (FIELD_SEPARATOR, ID_SEPARATOR, RECORD_SEPARATOR)):
            raise CodecError(f"Term cannot be stored: {term!r}")
        if not doc_ids:
            raise CodecError(f"Empty posting list for term {term!r}")
        for doc_id in doc_ids:
            if not doc_id or ID_SEPARATOR in doc_id or RECORD_SEPARATOR in doc_id:
                raise CodecError(f"Document identifier cannot be stored: {doc_id!r}")

        ids = "".join(doc_id + ID_SEPARATOR for doc_id in doc_ids)
        return term + FIELD_SEPARATOR + ids + RECORD_SEPARATOR

    def encode(self, index: Dict[str, List[str]]) -> bytes:
        """
        Serialize and obfuscate an index.

        Args:
            index: Mapping of term -> list of doc_ids.

        Returns:
            Obfuscated bytes ready to be written as-is.
        """
        plaintext = "".join(self.encode_record(term, doc_ids) for term, doc_ids in index.items())
        # surrogateescape writes undecodable filename bytes back out unchanged
        data = self.transform(plaintext.encode(self.encoding, errors="surrogateescape"))
        logger.debug("Encoded %d records into %d bytes", len(index), len(data))
        return data

    def decode_record(self, line: str):
        """
        Parse one plaintext record.

        Returns:
            (term, doc_ids) or None if the line is malformed.
        """
        term, sep, ids = line.partition(FIELD_SEPARATOR)
        if not sep:
            return None

        term = "".join(term.split())
        if ids.endswith(ID_SEPARATOR):
            ids = ids[:-1]
        # dict.fromkeys drops repeated ids while keeping file order
        doc_ids = list(dict.fromkeys(d for d in ids.split(ID_SEPARATOR) if d))

        if not term or not doc_ids:
            return None
        return term, doc_ids

    def decode(self, data: bytes) -> Dict[str, List[str]]:
        """
        De-obfuscate and parse an index.

        Malformed lines are skipped silently; this never raises for bad
        content.

        Args:
            data: Bytes as read from the index file.

        Returns:
            Mapping of term -> list of doc_ids.
        """
        plaintext = self.transform(data).decode(self.encoding, errors="surrogateescape")

        index = {}
        for line in plaintext.split(RECORD_SEPARATOR):
            record = self.decode_record(line)
            if record is None:
                continue
            term, doc_ids = record
            index[term] = doc_ids
        return index
