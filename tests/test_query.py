import pytest

from cryptoseek import Config
from cryptoseek.query import Found, NotFound, QueryEngine


@pytest.fixture
def query_engine():
    return QueryEngine(Config())


def test_exact_lookup_normalizes_query(query_engine, sample_index):
    result = query_engine.lookup(sample_index, "Cat")
    assert isinstance(result, Found)
    assert result.term == "cat"
    assert set(result.documents) == {"a.txt", "b.txt"}


def test_lookup_strips_punctuation(query_engine, sample_index):
    assert query_engine.lookup(sample_index, "dog!!") == Found("dog", ["b.txt"])


def test_found_documents_follow_index_order(query_engine):
    index = {"cat": ["z.txt", "a.txt"]}
    assert query_engine.lookup(index, "cat").documents == ["z.txt", "a.txt"]


def test_miss_suggests_terms_containing_query(query_engine, sample_index):
    result = query_engine.lookup(sample_index, "ca")
    assert isinstance(result, NotFound)
    assert result.term == "ca"
    assert "cat" in result.suggestions


def test_suggestions_follow_index_order(query_engine, sample_index):
    assert query_engine.lookup(sample_index, "AT").suggestions == ["cat", "sat"]


def test_miss_without_suggestions(query_engine, sample_index):
    assert query_engine.lookup(sample_index, "zebra") == NotFound("zebra", [])


def test_empty_query_suggests_every_term(query_engine, sample_index):
    for raw in ["", "!!!"]:
        result = query_engine.lookup(sample_index, raw)
        assert result == NotFound("", list(sample_index))


def test_lookup_on_empty_index(query_engine):
    assert query_engine.lookup({}, "cat") == NotFound("cat", [])


def test_similar_terms(query_engine, sample_index):
    assert query_engine.similar_terms(sample_index, "cot", max_dist=1) == [("cat", 1)]
    assert query_engine.similar_terms(sample_index, "cot", max_dist=2) == [
        ("cat", 1), ("dog", 2), ("sat", 2),
    ]


def test_similar_terms_top_k(query_engine, sample_index):
    assert query_engine.similar_terms(sample_index, "cot", max_dist=2, top_k=1) == [("cat", 1)]


def test_similar_terms_uses_config_defaults(query_engine, sample_index):
    assert query_engine.similar_terms(sample_index, "cot")[0] == ("cat", 1)


def test_similar_terms_empty_query(query_engine, sample_index):
    assert query_engine.similar_terms(sample_index, "") == []
