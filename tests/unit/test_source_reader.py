from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from linegrep.errors import InvalidConfiguration, MalformedLine, SourceUnavailable
from linegrep.source_reader import read_lines, read_stream


def texts(buffer) -> list[str]:
    return [line.text for line in buffer]


def test_reads_file_into_indexed_buffer(write_source) -> None:
    path = write_source(["apple", "Banana", "cherry"])

    buffer = read_lines(str(path))

    assert texts(buffer) == ["apple", "Banana", "cherry"]
    assert [line.index for line in buffer] == [0, 1, 2]


def test_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"one\r\ntwo\n\nthree\rstill three\nlast")

    assert texts(read_lines(str(path))) == ["one", "two", "", "three\rstill three", "last"]


def test_empty_file_gives_empty_buffer(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")

    assert len(read_lines(str(path))) == 0


def test_missing_file_raises_source_unavailable(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"

    with pytest.raises(SourceUnavailable) as excinfo:
        read_lines(str(missing))
    assert excinfo.value.source == str(missing)


def test_directory_raises_source_unavailable(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable):
        read_lines(str(tmp_path))


def test_undecodable_line_is_fatal_by_default(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"fine\nbad \xff\xfe byte\nfine again\n")

    with pytest.raises(MalformedLine) as excinfo:
        read_lines(str(path))
    assert excinfo.value.line_number == 2


def test_replace_policy_substitutes_and_continues(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"fine\nbad \xff byte\n")

    buffer = read_lines(str(path), errors="replace")

    assert texts(buffer) == ["fine", "bad \ufffd byte"]


def test_non_default_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes("café\nnaïve\n".encode("latin-1"))

    assert texts(read_lines(str(path), encoding="latin-1")) == ["café", "naïve"]


def test_unknown_encoding_is_reported_against_source(write_source) -> None:
    path = write_source(["x"])

    with pytest.raises(SourceUnavailable) as excinfo:
        read_lines(str(path), encoding="no-such-codec")
    assert excinfo.value.source == str(path)


def test_unknown_policy_is_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        read_stream([b"x\n"], errors="ignore")


def test_read_stream_accepts_text_lines() -> None:
    assert texts(read_stream(["a\n", "b\r\n", "c"])) == ["a", "b", "c"]


def test_dash_reads_standard_input(monkeypatch: pytest.MonkeyPatch) -> None:
    stdin = io.TextIOWrapper(io.BytesIO("x\ny\n".encode("utf-8")), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)

    assert texts(read_lines("-")) == ["x", "y"]
