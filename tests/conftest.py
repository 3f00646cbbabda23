"""Shared fixtures for the CryptoSeek tests."""

import pytest

from cryptoseek import CryptoSeek, Indexer

SAMPLE_CORPUS = [("a.txt", "The cat sat"), ("b.txt", "cat! dog.")]


@pytest.fixture
def sample_corpus():
    return list(SAMPLE_CORPUS)


@pytest.fixture
def sample_index(sample_corpus):
    return Indexer().build_inverted_index(sample_corpus)


@pytest.fixture
def docs_dir(tmp_path):
    """A documents directory holding the sample corpus plus noise."""
    d = tmp_path / "documents"
    d.mkdir()
    for name, text in SAMPLE_CORPUS:
        (d / name).write_text(text, encoding="utf-8")
    (d / "readme.md").write_text("markdown is ignored", encoding="utf-8")
    nested = d / "nested"
    nested.mkdir()
    (nested / "deep.txt").write_text("hidden zebra cat", encoding="utf-8")
    return d


@pytest.fixture
def engine(tmp_path, docs_dir):
    return CryptoSeek(docs_dir=docs_dir, index_file=tmp_path / "encrypted.idx")
