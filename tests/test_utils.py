import pytest

from cryptoseek import Config
from cryptoseek.query import Found, NotFound
from cryptoseek.utils import ResultFormatter


@pytest.fixture
def formatter():
    return ResultFormatter(Config())


def test_format_found(formatter):
    assert formatter.format_result(Found("cat", ["a.txt", "b.txt"])) == [
        "Found 'cat' in:",
        " - a.txt",
        " - b.txt",
    ]


def test_format_not_found_with_suggestions(formatter):
    assert formatter.format_result(NotFound("ca", ["cat", "scan"])) == [
        "No results for 'ca'",
        "Did you mean:",
        " - cat",
        " - scan",
    ]


def test_format_not_found_without_suggestions(formatter):
    assert formatter.format_result(NotFound("zebra", [])) == ["No results for 'zebra'"]


def test_format_similar(formatter):
    assert formatter.format_similar([]) == []
    assert formatter.format_similar([("cat", 1)]) == ["Close matches:", " - cat (distance 1)"]


def test_print_stats(formatter, capsys):
    formatter.print_stats({"unique_terms": 4, "index_file": "x.idx"})
    out = capsys.readouterr().out
    assert "unique_terms : 4" in out
    assert "index_file   : x.idx" in out


def test_undecodable_names_are_printable(formatter):
    name = b"caf\xe9.txt".decode("utf-8", errors="surrogateescape")
    lines = formatter.format_result(Found("cat", [name]))
    assert lines == ["Found 'cat' in:", " - caf�.txt"]
    assert all(line.encode("utf-8") for line in lines)
