from __future__ import annotations

from minipas import Diagnostics, Position, SourceCursor
from minipas.errors import UNKNOWN_ERROR


def test_advance_tracks_line_and_column() -> None:
    cur = SourceCursor("ab\ncd")
    seen = []
    while not cur.at_end:
        seen.append((cur.current_char, cur.line, cur.column))
        cur.advance()
    assert seen == [
        ("a", 0, 0),
        ("b", 0, 1),
        ("\n", 0, 2),
        ("c", 1, 0),
        ("d", 1, 1),
    ]
    assert cur.current_char == "\0"
    cur.advance()
    assert cur.at_end


def test_two_character_terminators_collapse() -> None:
    cur = SourceCursor("a\r\nb")
    assert cur.text == "a\nb"
    assert cur.lines == ["a", "b"]


def test_record_error_defaults_to_current_position_and_table_message() -> None:
    diags = Diagnostics()
    cur = SourceCursor("x\n yz", diags)
    for _ in range(3):
        cur.advance()
    d = cur.record_error(302)
    assert (d.line, d.column, d.message) == (2, 2, "invalid character")


def test_record_error_at_explicit_position_with_message() -> None:
    cur = SourceCursor("abc")
    d = cur.record_error(404, "expected ';'", at=Position(0, 2))
    assert (d.line, d.column, d.message) == (1, 3, "expected ';'")


def test_record_error_after_end_is_clamped_to_last_char() -> None:
    cur = SourceCursor("ab")
    cur.advance()
    cur.advance()
    d = cur.record_error(304)
    assert (d.line, d.column) == (1, 2)


def test_unknown_code_gets_generic_message() -> None:
    cur = SourceCursor("")
    d = cur.record_error(999)
    assert d.message == UNKNOWN_ERROR


def test_duplicates_are_kept() -> None:
    cur = SourceCursor("a")
    cur.record_error(302)
    cur.record_error(302)
    assert len(cur.diagnostics) == 2
