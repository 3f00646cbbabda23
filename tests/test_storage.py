import os

import pytest

from cryptoseek import Config
from cryptoseek.storage import DocumentStore, IndexUnreadableError, IndexWriteError, StorageError


@pytest.fixture
def store():
    return DocumentStore(Config())


def test_list_documents_is_flat_and_filtered(store, docs_dir):
    names = [p.name for p in store.list_documents(docs_dir)]
    assert names == ["a.txt", "b.txt"]


def test_list_documents_custom_extensions(store, docs_dir):
    names = [p.name for p in store.list_documents(docs_dir, [".md"])]
    assert names == ["readme.md"]


def test_list_documents_missing_directory(store, tmp_path):
    assert store.list_documents(tmp_path / "missing") == []


def test_load_documents_yields_filename_and_text(store, docs_dir):
    assert list(store.load_documents(docs_dir)) == [
        ("a.txt", "The cat sat"),
        ("b.txt", "cat! dog."),
    ]


def test_load_documents_ignores_undecodable_bytes(store, tmp_path):
    (tmp_path / "bin.txt").write_bytes(b"cat\xff\xfe dog")
    assert list(store.load_documents(tmp_path)) == [("bin.txt", "cat dog")]


def test_load_documents_skips_names_the_index_cannot_store(store, tmp_path):
    (tmp_path / "a,b.txt").write_text("cat", encoding="utf-8")
    (tmp_path / "ok.txt").write_text("dog", encoding="utf-8")
    assert list(store.load_documents(tmp_path)) == [("ok.txt", "dog")]


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                    reason="permissions are not enforced for root")
def test_load_documents_skips_unreadable_file(store, tmp_path):
    locked = tmp_path / "locked.txt"
    locked.write_text("secret", encoding="utf-8")
    locked.chmod(0)
    (tmp_path / "ok.txt").write_text("dog", encoding="utf-8")
    try:
        assert list(store.load_documents(tmp_path)) == [("ok.txt", "dog")]
    finally:
        locked.chmod(0o600)


def test_index_bytes_round_trip(store, tmp_path):
    path = tmp_path / "encrypted.idx"
    store.write_index_bytes(path, b"\x00\x01K")
    assert store.read_index_bytes(path) == b"\x00\x01K"


def test_write_overwrites_wholesale(store, tmp_path):
    path = tmp_path / "encrypted.idx"
    store.write_index_bytes(path, b"a much longer first payload")
    store.write_index_bytes(path, b"short")
    assert path.read_bytes() == b"short"


def test_read_missing_index_raises(store, tmp_path):
    with pytest.raises(IndexUnreadableError):
        store.read_index_bytes(tmp_path / "missing.idx")


def test_write_into_missing_directory_raises(store, tmp_path):
    with pytest.raises(IndexWriteError) as excinfo:
        store.write_index_bytes(tmp_path / "missing" / "encrypted.idx", b"data")
    assert isinstance(excinfo.value, StorageError)
    assert isinstance(excinfo.value, OSError)


def test_invalid_byte_inside_token_merges_the_pieces(store, tmp_path):
    (tmp_path / "a.txt").write_bytes(b"ab\xffcd")
    assert list(store.load_documents(tmp_path)) == [("a.txt", "abcd")]
