from __future__ import annotations

from vim_motion.motion import paragraph_begin, paragraph_end

from motion_helpers import INCL, at, make_document


def test_paragraph_end_stops_on_separator_line() -> None:
    document = make_document("foo", "", "bar")

    assert paragraph_end(at(0, 0), document) == at(1, 0)


def test_paragraph_end_from_separator_moves_to_next_paragraph() -> None:
    document = make_document("foo", "", "bar")

    assert paragraph_end(at(1, 0), document) == at(2, 2)


def test_paragraph_end_walks_multi_line_paragraph() -> None:
    document = make_document("a", "b", "", "", "c")

    assert paragraph_end(at(0, 0), document) == at(2, 0)


def test_paragraph_end_skips_leading_separators() -> None:
    document = make_document("a", "", "", "b", "cde")

    assert paragraph_end(at(1, 0), document) == at(4, 2)
    assert paragraph_end(at(1, 0, INCL), document) == at(4, 3, INCL)


def test_paragraph_end_on_last_line_is_a_fixed_point() -> None:
    document = make_document("a", "", "bc")
    once = paragraph_end(at(2, 0), document)

    assert once == at(2, 1)
    assert paragraph_end(once, document) == once


def test_whitespace_line_does_not_separate_paragraphs() -> None:
    document = make_document("a", "  ", "b")

    assert paragraph_end(at(0, 0), document) == at(2, 0)
    assert paragraph_begin(at(2, 0), document) == at(0, 0)


def test_paragraph_begin_stops_on_separator_line() -> None:
    document = make_document("foo", "", "bar")

    assert paragraph_begin(at(2, 1), document) == at(1, 0)


def test_paragraph_begin_from_separator_moves_to_previous_paragraph() -> None:
    document = make_document("foo", "", "bar")

    assert paragraph_begin(at(1, 0), document) == at(0, 0)


def test_paragraph_begin_in_first_paragraph_goes_to_document_start() -> None:
    document = make_document("a", "b")
    once = paragraph_begin(at(1, 0), document)

    assert once == at(0, 0)
    assert paragraph_begin(once, document) == once


def test_single_empty_line_document() -> None:
    document = make_document("")

    assert paragraph_end(at(0, 0), document) == at(0, 0)
    assert paragraph_begin(at(0, 0), document) == at(0, 0)
