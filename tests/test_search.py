"""Tests for the incremental search session."""

from editcore.core import Document, HighlightType, Position, Row
from editcore.utils import SearchEngine


def make_document(*lines):
    document = Document([Row(line) for line in lines])
    document.highlight(None)
    return document


def test_update_moves_cursor_and_highlights():
    document = make_document("a cat sat", "on a cat")
    engine = SearchEngine(document, Position(0, 0))

    result = engine.update("cat")

    assert result.position == Position(2, 0)
    assert result.length == 3
    assert engine.cursor == Position(2, 0)
    assert document.rows[0].highlighting[2:5] == [HighlightType.MATCH] * 3


def test_find_next_and_previous():
    document = make_document("a cat sat", "on a cat")
    engine = SearchEngine(document, Position(0, 0))
    engine.update("cat")

    assert engine.find_next().position == Position(5, 1)

    assert engine.find_next() is None
    assert engine.cursor == Position(5, 1)

    assert engine.find_previous().position == Position(2, 0)


def test_find_next_wraps_to_next_row():
    document = make_document("ab", "cab")
    engine = SearchEngine(document, Position(2, 0))

    assert engine.find_next("ab").position == Position(1, 1)


def test_find_next_without_query():
    engine = SearchEngine(make_document("abc"), Position(0, 0))

    assert engine.find_next() is None
    assert engine.find_previous() is None


def test_find_all():
    document = make_document("a cat sat", "on a cat", "catcat")
    engine = SearchEngine(document, Position(0, 0))

    positions = [result.position for result in engine.find_all("cat")]

    assert positions == [Position(2, 0), Position(5, 1), Position(0, 2), Position(3, 2)]
    assert engine.find_all("") == []


def test_cancel_restores_cursor():
    document = make_document("a cat")
    engine = SearchEngine(document, Position(0, 0))
    engine.update("cat")

    assert engine.finish(accepted=False) == Position(0, 0)
    assert HighlightType.MATCH not in document.rows[0].highlighting


def test_accept_keeps_cursor():
    document = make_document("a cat")
    engine = SearchEngine(document, Position(0, 0))
    engine.update("cat")

    assert engine.finish(accepted=True) == Position(2, 0)


def test_find_next_at_end_of_document_keeps_cursor():
    document = make_document("ab")
    engine = SearchEngine(document, Position(0, 1))

    assert engine.find_next("zz") is None
    assert engine.cursor == Position(0, 1)
