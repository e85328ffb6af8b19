from __future__ import annotations

from pathlib import Path

import pytest

from minipas import SourceError, analyze_file, analyze_source


def test_token_codes_rendering() -> None:
    res = analyze_source("program P; var x: integer; begin writeln('hi') end.")
    assert res.token_codes() == "122 2 14 105 2 5 126 14 113 125 9 84 10 104 61"
    assert res.token_codes(wire_compatible=True) == "122 2 14 105 2 5 100 14 113 125 9 16 10 104 61"
    assert len(res.codes) == len(res.tokens)


def test_listing_places_caret_under_column() -> None:
    res = analyze_source("program P;\nbegin\n  x := ;\nend.")
    assert res.listing() == (
        "        program P;\n"
        "        begin\n"
        "          x := ;\n"
        "**01**        ^ error code 409\n"
        "****** identifier or number expected\n"
        "        end.\n"
        "\n"
        "Compilation finished: errors - 1 !\n"
    )


def test_listing_numbers_follow_sorted_order() -> None:
    res = analyze_source("begin x := 1 end\n? ")
    assert [(d.number, d.code) for d in res.diagnostics] == [(1, 403), (2, 302)]
    text = res.listing()
    assert "**01**" in text and "**02**" in text
    assert text.index("error code 403") < text.index("error code 302")


def test_clean_program_listing() -> None:
    res = analyze_source("begin end.")
    assert res.ok
    assert res.listing().endswith("Compilation finished: errors - 0 !\n")


def test_analyze_file(tmp_path: Path) -> None:
    p = tmp_path / "prog.pas"
    p.write_bytes("\ufeffprogram P;\r\nbegin\r\n  x := 1\r\nend.\r\n".encode("utf-8"))
    res = analyze_file(p)
    assert res.ok
    assert res.file == str(p.resolve())
    assert res.lines[:2] == ("program P;", "begin")


def test_analyze_missing_file_is_source_error(tmp_path: Path) -> None:
    with pytest.raises(SourceError) as e:
        analyze_file(tmp_path / "missing.pas")
    assert "file not found" in str(e.value)


def test_rerun_is_identical() -> None:
    src = "program P;\nvar a: array [1..] of integer;\nbegin x := 'oops\n  y := 99999 end"
    a = analyze_source(src)
    b = analyze_source(src)
    assert a.token_codes() == b.token_codes()
    assert a.diagnostics == b.diagnostics
    assert a.listing() == b.listing()
