#!/usr/bin/env python3
"""
Example usage of CryptoSeek.

This script demonstrates how to use the library programmatically:
building an index from a throwaway corpus, searching it, and looking at
the obfuscated bytes on disk.
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path to import cryptoseek
sys.path.append(str(Path(__file__).parent.parent))

from cryptoseek import CryptoSeek, IndexCodec, Indexer
import config


SAMPLE_DOCS = {
    "pets.txt": "The cat sat on the mat. Don't wake the dog!",
    "farm.txt": "A dog, a cow, and a category of catalogues.",
    "notes.txt": "Concatenate strings; never scatter them.",
}


def write_corpus(docs_dir: Path) -> None:
    docs_dir.mkdir(parents=True, exist_ok=True)
    for name, text in SAMPLE_DOCS.items():
        (docs_dir / name).write_text(text, encoding="utf-8")
    # Nested files are never indexed
    (docs_dir / "archive").mkdir(exist_ok=True)
    (docs_dir / "archive" / "old.txt").write_text("zebra", encoding="utf-8")


def basic_search_example(workdir: Path):
    """Demonstrate indexing and lookups."""
    print("=== Basic Search Example ===")

    engine = CryptoSeek(docs_dir=workdir / "documents", index_file=workdir / "encrypted.idx")
    index = engine.build_index()
    print(f"Indexed {len(index)} terms into {engine.index_file}")

    for query in ["Cat", "dog!", "cat", "ca", "zebra", ""]:
        result = engine.search(query)
        print(f"\nQuery: {query!r}")
        engine.result_formatter.print_result(result)


def similar_terms_example(workdir: Path):
    """Demonstrate edit-distance close matches on a miss."""
    print("\n=== Close Matches Example ===")

    engine = CryptoSeek(docs_dir=workdir / "documents", index_file=workdir / "encrypted.idx")
    index = engine.load_index()
    for query in ["cta", "dgo", "mta"]:
        result = engine.search(query, index=index)
        print(f"\nQuery: {query!r}")
        engine.result_formatter.print_result(result, engine.similar_terms(result, index))


def codec_example():
    """Show what the on-disk bytes look like."""
    print("\n=== Codec Example ===")

    index = Indexer().build_inverted_index([("a.txt", "The cat sat"), ("b.txt", "cat! dog.")])
    codec = IndexCodec(config.XOR_KEY)
    data = codec.encode(index)
    print(f"Obfuscated: {data!r}")
    print(f"Plaintext:  {codec.transform(data)!r}")
    print(f"Decoded:    {codec.decode(data)}")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        workdir = Path(tmp)
        write_corpus(workdir / "documents")
        basic_search_example(workdir)
        similar_terms_example(workdir)
    codec_example()
