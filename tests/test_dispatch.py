from __future__ import annotations

import io
from pathlib import Path

import pytest

from pycut import (
    Bytes,
    Chars,
    Fields,
    SourceReadError,
    cut_source,
    cut_sources,
    mode_from_options,
    parse_positions,
)


def _write(path: Path, text: str, encoding: str = "utf-8") -> str:
    path.write_bytes(text.encode(encoding))
    return str(path)


def test_chars_mode_line_per_line(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", "ábcdef\n\nxyz\n")
    out = io.StringIO()
    res = cut_sources([src], Chars(parse_positions("1,3-4")), out=out)
    assert out.getvalue() == "ácd\n\nxz\n"
    assert res.ok
    assert res.processed == [src]


def test_bytes_mode_replaces_split_characters(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", "ábc\nabc")
    out = io.StringIO()
    cut_sources([src], Bytes(parse_positions("1")), out=out)
    assert out.getvalue() == "�\na\n"


def test_crlf_and_lone_cr(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", "abc\r\nd\re\n")
    out = io.StringIO()
    cut_sources([src], Chars(parse_positions("1-3")), out=out)
    assert out.getvalue() == "abc\nd\re\n"


def test_fields_mode_tab_delimited(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.tsv", "Captain\tSham\t12345\nLieutenant\tUhura\t67890\n")
    out = io.StringIO()
    cut_sources([src], Fields(parse_positions("1")), out=out)
    assert out.getvalue() == "Captain\nLieutenant\n"

    out = io.StringIO()
    cut_sources([src], Fields(parse_positions("3,1")), out=out)
    assert out.getvalue() == "12345\tCaptain\n67890\tLieutenant\n"


def test_fields_mode_quoting(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.csv", 'a,"b,c",d\n"x ""y""",2,3\n')
    out = io.StringIO()
    cut_sources([src], Fields(parse_positions("2")), delimiter=",", out=out)
    # a selected field holding the delimiter or a quote is quoted again
    assert out.getvalue() == '"b,c"\n2\n'

    out = io.StringIO()
    cut_sources([src], Fields(parse_positions("1,3")), delimiter=",", out=out)
    assert out.getvalue() == 'a,d\n"x ""y""",3\n'


def test_fields_mode_ragged_records(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", "1:2:3\n4\n5:6\n")
    out = io.StringIO()
    cut_sources([src], Fields(parse_positions("2-3")), delimiter=":", out=out)
    assert out.getvalue() == "2:3\n\n6\n"


def test_missing_source_is_reported_and_skipped(tmp_path: Path) -> None:
    good = _write(tmp_path / "good.txt", "hello\n")
    missing = str(tmp_path / "missing.txt")
    out, err = io.StringIO(), io.StringIO()

    res = cut_sources([missing, good], Chars(parse_positions("1-2")), out=out, err=err)

    assert out.getvalue() == "he\n"
    assert err.getvalue().startswith(f"{missing}: ")
    assert "No such file or directory" in err.getvalue()
    assert res.failed == [missing]
    assert res.processed == [good]
    assert not res.ok


def test_directory_is_an_open_failure(tmp_path: Path) -> None:
    err = io.StringIO()
    res = cut_sources([str(tmp_path)], Chars(parse_positions("1")), out=io.StringIO(), err=err)
    assert res.failed == [str(tmp_path)]
    assert err.getvalue().startswith(f"{tmp_path}: ")


def test_sources_are_processed_in_order(tmp_path: Path) -> None:
    a = _write(tmp_path / "a.txt", "a1\na2\n")
    b = _write(tmp_path / "b.txt", "b1\n")
    out = io.StringIO()
    cut_sources([b, a, b], Chars(parse_positions("1")), out=out)
    assert out.getvalue() == "b\na\na\nb\n"


def test_stdin_marker_and_default() -> None:
    out = io.StringIO()
    res = cut_sources([], Chars(parse_positions("2")), out=out, stdin=io.StringIO("ab\ncd\n"))
    assert out.getvalue() == "b\nd\n"
    assert res.processed == ["-"]

    out = io.StringIO()
    cut_sources(["-"], Fields(parse_positions("2")), out=out, stdin=io.StringIO("x\ty\n"))
    assert out.getvalue() == "y\n"


def test_invalid_input_encoding_is_a_read_error(tmp_path: Path) -> None:
    src = tmp_path / "bad.txt"
    src.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(SourceReadError) as e:
        cut_sources([str(src)], Chars(parse_positions("1")), out=io.StringIO())
    assert e.value.name == str(src)
    assert isinstance(e.value.cause, UnicodeDecodeError)


def test_latin1_input(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.txt", "ábc\n", encoding="latin-1")
    out = io.StringIO()
    cut_sources([src], Bytes(parse_positions("1")), encoding="latin-1", out=out)
    assert out.getvalue() == "á\n"


def test_cut_source_rejects_unknown_mode() -> None:
    with pytest.raises(RuntimeError):
        cut_source(io.StringIO("x\n"), "-", object(), out=io.StringIO())  # type: ignore[arg-type]


def test_mode_from_options() -> None:
    positions = parse_positions("1")
    assert mode_from_options(bytes_=positions) == Bytes(positions)
    assert mode_from_options(fields=positions).name == "fields"
    with pytest.raises(ValueError):
        mode_from_options()
    with pytest.raises(ValueError):
        mode_from_options(chars=positions, fields=positions)


def test_fields_mode_skips_blank_lines(tmp_path: Path) -> None:
    src = _write(tmp_path / "in.tsv", "a\tb\n\nc\td\n\n")
    out = io.StringIO()
    cut_sources([src], Fields(parse_positions("1")), out=out)
    assert out.getvalue() == "a\nc\n"

    # chars and bytes modes keep one output line per input line
    out = io.StringIO()
    cut_sources([src], Chars(parse_positions("1")), out=out)
    assert out.getvalue() == "a\n\nc\n\n"
