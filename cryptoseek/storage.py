"""
File-system access for documents and the index file.

Documents are read from a single flat directory; subdirectories are never
entered. The index file is read and written as raw bytes.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from .codec import ID_SEPARATOR, RECORD_SEPARATOR

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class StorageError(OSError):
    """Base class for storage failures."""


class IndexUnreadableError(StorageError):
    """The index file could not be opened or read."""


class IndexWriteError(StorageError):
    """The index file could not be opened or written."""


class DocumentStore:
    """Reads documents and index bytes from disk."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def list_documents(self, docs_dir: PathLike, extensions: Iterable[str] = None) -> List[Path]:
        """
        List indexable files directly inside ``docs_dir``.

        Args:
            docs_dir: Corpus directory.
            extensions: Accepted suffixes, e.g. ``[".txt"]``.

        Returns:
            Sorted list of file paths. Missing or unreadable directories
            give an empty list.
        """
        if extensions is None:
            extensions = self.config.TEXT_EXTENSIONS
        extensions = set(extensions)

        try:
            entries = list(os.scandir(docs_dir))
        except OSError as e:
            logger.warning("Could not read documents directory %s: %s", docs_dir, e)
            return []

        files = [Path(entry.path) for entry in entries
                 if entry.is_file() and os.path.splitext(entry.name)[1] in extensions]
        return sorted(files)

    def load_documents(self, docs_dir: PathLike, extensions: Iterable[str] = None) -> Iterator[Tuple[str, str]]:
        """
        Yield (filename, text) pairs for every indexable file in ``docs_dir``.

        Files that cannot be read are logged and skipped.
        """
        for path in self.list_documents(docs_dir, extensions):
            if ID_SEPARATOR in path.name or RECORD_SEPARATOR in path.name:
                logger.warning("Skipping %r: name cannot be stored in the index", path.name)
                continue
            try:
                with open(path, "r", encoding=self.config.ENCODING,
                          errors=self.config.ENCODING_ERRORS) as f:
                    text = f.read()
            except OSError as e:
                logger.warning("Could not load %s: %s", path.name, e)
                continue
            yield path.name, text

    def read_index_bytes(self, index_file: PathLike) -> bytes:
        """
        Read the raw bytes of the index file.

        Raises:
            IndexUnreadableError: If the file cannot be opened or read.
        """
        try:
            with open(index_file, "rb") as f:
                return f.read()
        except OSError as e:
            raise IndexUnreadableError(f"Could not open index file {index_file}: {e}") from e

    def write_index_bytes(self, index_file: PathLike, data: bytes) -> None:
        """
        Overwrite the index file with ``data``.

        Raises:
            IndexWriteError: If the file cannot be opened or written.
        """
        try:
            with open(index_file, "wb") as f:
                f.write(data)
        except OSError as e:
            raise IndexWriteError(f"Could not write index file {index_file}: {e}") from e
        logger.info("Wrote %d bytes to %s", len(data), index_file)
